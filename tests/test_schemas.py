"""
Tests for the pydantic user schemas.
"""

import importlib
import warnings

from pydantic.warnings import PydanticDeprecatedSince20

from user_directory_api.app.schemas import user as user_schemas


def test_import_emits_no_pydantic_deprecations():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        importlib.reload(user_schemas)

    assert not [w for w in caught if issubclass(w.category, PydanticDeprecatedSince20)]


def test_examples_in_json_schema():
    schema = user_schemas.UserRead.model_json_schema()

    assert schema["properties"]["id"]["examples"] == ["guest"]
    assert schema["properties"]["name"]["examples"] == ["Guest User"]
    assert user_schemas.UserSave.model_json_schema()["properties"]["name"]["examples"] == ["Guest User"]
