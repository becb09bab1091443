from jobly.config import PLACEHOLDER_SECRET_KEY, Settings


def _settings(**overrides):
    return Settings(_env_file=None, **overrides)


def test_defaults_are_flagged_as_placeholders():
    problems = _settings().placeholder_problems()
    assert len(problems) == 2
    assert any("SECRET_KEY" in p for p in problems)
    assert any("DATABASE_URL" in p for p in problems)


def test_real_values_have_no_problems():
    s = _settings(secret_key="s3cret", database_url="postgresql://app:pw@db:5432/jobly")
    assert s.placeholder_problems() == []


def test_secret_key_placeholder_alone():
    s = _settings(secret_key=PLACEHOLDER_SECRET_KEY, database_url="sqlite://")
    assert s.placeholder_problems() == ["SECRET_KEY is the placeholder default"]


def test_is_production():
    assert _settings(app_env="production").is_production
    assert _settings(app_env=" Prod ").is_production
    assert not _settings(app_env="staging").is_production
    assert not _settings(app_env="").is_production


def test_cors_origins_split_and_trimmed():
    s = _settings(cors_allow_origins="https://a.example.com, https://b.example.com,,")
    assert s.cors_origins == ["https://a.example.com", "https://b.example.com"]
