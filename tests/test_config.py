import pytest

from investcalc.config import DEFAULT_CORS_ORIGINS, Settings


def test_defaults_when_environment_is_empty():
    settings = Settings.from_env({})

    assert settings == Settings()
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.currency_symbol == "₹"
    assert settings.max_years == 100


def test_environment_overrides():
    settings = Settings.from_env(
        {
            "INVESTCALC_CORS_ORIGINS": "https://calc.example.com, http://localhost:8080 ,",
            "INVESTCALC_CURRENCY_SYMBOL": "$",
            "INVESTCALC_DECIMAL_SCALE": "2",
            "INVESTCALC_MAX_YEARS": "40",
            "INVESTCALC_LOG_LEVEL": "debug",
        }
    )

    assert settings.cors_origins == ("https://calc.example.com", "http://localhost:8080")
    assert settings.currency_symbol == "$"
    assert settings.decimal_scale == 2
    assert settings.max_years == 40
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("INVESTCALC_DECIMAL_SCALE", "-1"),
        ("INVESTCALC_DECIMAL_SCALE", "two"),
        ("INVESTCALC_MAX_YEARS", "0"),
        ("INVESTCALC_LOG_LEVEL", "verbose"),
    ],
)
def test_unusable_values_name_the_variable(name, value):
    with pytest.raises(ValueError, match=name):
        Settings.from_env({name: value})
