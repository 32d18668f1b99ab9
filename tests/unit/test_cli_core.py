from aton_import.cli import parse_args


def test_parse_args_defaults():
    args = parse_args(["racon", "--input", "racons.csv"])
    assert args.command == "racon"
    assert args.input == "racons.csv"
    assert args.overlay_config_dir is None
    assert args.changeset is None
    assert args.user_id is None
    assert args.strict is False


def test_parse_args_attribution_and_changeset():
    args = parse_args(["racon", "--input", "r.csv", "--user", "ops", "--user-id", "12", "--changeset", "7"])
    assert args.user == "ops"
    assert args.user_id == 12
    assert args.changeset == 7
