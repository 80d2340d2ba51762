"""Settings tests"""

import pytest
from pydantic import ValidationError

from app.config import Settings


def test_list_settings_are_split():
    config = Settings(ALLOWED_ORIGINS="http://a.test, http://b.test", ALLOWED_METHODS="GET,POST")

    assert config.ALLOWED_ORIGINS == ["http://a.test", "http://b.test"]
    assert config.ALLOWED_METHODS == ["GET", "POST"]


def test_store_backend_is_normalized():
    assert Settings(STORE_BACKEND=" Remote ").STORE_BACKEND == "remote"


def test_unknown_store_backend_rejected():
    with pytest.raises(ValidationError):
        Settings(STORE_BACKEND="spreadsheet")


def test_environment_flags():
    assert Settings(ENVIRONMENT="Production").is_production
    assert Settings(ENVIRONMENT="development").is_development


def test_app_imports_with_routes():
    from app.main import app

    paths = {route.path for route in app.routes}
    assert "/api/v1/fees/{fee_id}" in paths
    assert "/health" in paths


def test_result_alias_is_subscriptable():
    from typing import get_args

    from app.core.result import Failure, Result, Success
    from app.schemas.fee import FeeRecord

    alias = Result[FeeRecord]
    assert get_args(alias) == (FeeRecord,)
    assert Success(value=1).ok
    assert not Failure(kind="not_found", detail="gone").ok
