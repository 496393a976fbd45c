from maven_essentials.core.arguments import ApplicationArguments, property_key_to_env


def test_source_args_are_kept_unmodified():
    raw = ["--server.port=9000", "run", "--debug", "--", "x=1"]
    arguments = ApplicationArguments(raw)

    assert arguments.source_args == tuple(raw)


def test_options_and_non_options_are_separated():
    arguments = ApplicationArguments(["--server.port=9000", "run", "--debug", "--", "-v"])

    assert arguments.option_names == ["server.port", "debug"]
    assert arguments.get_option_values("server.port") == ["9000"]
    assert arguments.get_option_values("debug") == []
    assert arguments.get_option_values("missing") is None
    assert arguments.contains_option("debug")
    assert arguments.non_option_args == ["run", "--", "-v"]


def test_repeated_option_keeps_every_value_and_last_wins_as_property():
    arguments = ApplicationArguments(["--server.port=1", "--server.port=2"])

    assert arguments.get_option_values("server.port") == ["1", "2"]
    assert arguments.as_properties() == {"SERVER_PORT": "2"}


def test_properties_only_include_options_with_values():
    arguments = ApplicationArguments(["--main.web-application-type=none", "--verbose"])

    assert arguments.as_properties() == {"MAIN_WEB_APPLICATION_TYPE": "none"}


def test_empty_value_is_a_value():
    arguments = ApplicationArguments(["--application.name="])

    assert arguments.get_option_values("application.name") == [""]
    assert arguments.as_properties() == {"APPLICATION_NAME": ""}


def test_property_key_relaxation():
    assert property_key_to_env("server.port") == "SERVER_PORT"
    assert property_key_to_env("main.web-application-type") == "MAIN_WEB_APPLICATION_TYPE"
    assert property_key_to_env("logging.level.root") == "LOGGING_LEVEL_ROOT"
