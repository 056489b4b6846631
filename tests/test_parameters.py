from tinycli.flag import Flag
from tinycli.parameter import Parameter, Parameters

VERBOSE = Flag(long="verbose", short="v")
OUTPUT = Flag(long="output", takes_value=True, default="out.txt")


def test_boolean_parameter_value():
    assert Parameter(VERBOSE, present=True).value is True
    assert Parameter.absent(VERBOSE).value is False


def test_value_parameter_uses_default_when_absent():
    assert Parameter.absent(OUTPUT).value == "out.txt"
    assert Parameter(OUTPUT, present=True, raw="dist").value == "dist"
    assert Parameter(OUTPUT, present=True).value is None


def test_parameters_lookup():
    parameters = Parameters()
    parameters.add(Parameter(VERBOSE, present=True))
    parameters.add(Parameter.absent(OUTPUT))

    assert len(parameters) == 2
    assert "verbose" in parameters
    assert "--verbose" in parameters
    assert "missing" not in parameters
    assert parameters.is_set("verbose")
    assert not parameters.is_set("output")
    assert not parameters.is_set("missing")
    assert parameters.value("output") == "out.txt"
    assert parameters.value("missing", "fallback") == "fallback"
    assert parameters.get("missing") is None


def test_parameters_keep_extraction_order():
    parameters = Parameters([Parameter.absent(OUTPUT), Parameter(VERBOSE, present=True)])
    assert [parameter.name for parameter in parameters] == ["output", "verbose"]
    assert parameters.as_dict() == {"output": "out.txt", "verbose": True}


def test_parameters_prefer_present_duplicate():
    """A global and a command flag may share a name; the present one wins."""
    command_verbose = Flag(long="verbose")
    parameters = Parameters(
        [Parameter.absent(VERBOSE), Parameter(command_verbose, present=True)]
    )
    assert len(parameters) == 2
    assert parameters.get("verbose").flag is command_verbose
    assert parameters.is_set("verbose")


def test_value_flag_without_value_reports_default_argument():
    parameters = Parameters([Parameter(OUTPUT, present=True)])
    assert parameters.is_set("output")
    assert parameters.value("output") is None
    assert parameters.value("output", "dist") == "dist"
