import pytest

from netanalysis.config import NetworkAnalysisConfig
from netanalysis.errors import ConfigurationError


def test_from_mapping_and_defaults():
    cfg = NetworkAnalysisConfig.from_mapping({'method': 'degrees', 'parameter': 'cohspctrm'})
    cfg.validate()
    assert cfg.degree_output == 'total'
    assert cfg.to_dict() == {
        'method': 'degrees',
        'parameter': 'cohspctrm',
        'inputfile': None,
        'outputfile': None,
        'degree_output': 'total',
    }


def test_unknown_option_is_rejected():
    with pytest.raises(ConfigurationError) as excinfo:
        NetworkAnalysisConfig.from_mapping({'method': 'degrees', 'paramter': 'x'})
    assert excinfo.value.field == 'paramter'


def test_invalid_degree_output():
    cfg = NetworkAnalysisConfig(method='degrees', parameter='x', degree_output='both')
    with pytest.raises(ConfigurationError) as excinfo:
        cfg.validate()
    assert excinfo.value.field == 'degree_output'


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        NetworkAnalysisConfig().validate()
