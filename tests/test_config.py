from csslint_cli.config import ReportConfig


def test_config_defaults(tmp_path):
    config = ReportConfig(tmp_path / "missing.toml")

    assert config.format == "checkstyle-xml"
    assert config.output is None


def test_config_from_file(tmp_path):
    config_path = tmp_path / ".csslint-report.toml"
    config_path.write_text(
        '[tool.csslint-report]\nformat = "compact"\noutput = "build/lint.xml"\n',
        encoding="utf-8",
    )

    config = ReportConfig(config_path)

    assert config.format == "compact"
    assert config.output == tmp_path / "build" / "lint.xml"


def test_config_invalid_toml_keeps_defaults(tmp_path, caplog):
    config_path = tmp_path / ".csslint-report.toml"
    config_path.write_text("[tool.csslint-report\nformat = ", encoding="utf-8")

    config = ReportConfig(config_path)

    assert config.format == "checkstyle-xml"
    assert "Ignoring config file" in caplog.text


def test_config_tool_not_a_table_keeps_defaults(tmp_path, caplog):
    config_path = tmp_path / ".csslint-report.toml"
    config_path.write_text('tool = "x"\n', encoding="utf-8")

    config = ReportConfig(config_path)

    assert config.format == "checkstyle-xml"
    assert config.output is None
    assert "Ignoring config file" in caplog.text


def test_config_non_string_output_keeps_defaults(tmp_path, caplog):
    config_path = tmp_path / ".csslint-report.toml"
    config_path.write_text(
        '[tool.csslint-report]\nformat = "compact"\noutput = 5\n', encoding="utf-8"
    )

    config = ReportConfig(config_path)

    assert config.format == "checkstyle-xml"
    assert config.output is None
    assert "Ignoring config file" in caplog.text
