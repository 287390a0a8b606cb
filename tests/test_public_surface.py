"""Test public API surface - ensure imports work correctly and no side effects.

This test verifies:
- jsonyaml exposes the conversion and codec functions from jsonyaml.api
- Everything in __all__ resolves
- Importing the package configures no logging handlers
"""

import logging


def test_all_names_resolve():
    import jsonyaml

    for name in jsonyaml.__all__:
        assert hasattr(jsonyaml, name), f"{name} listed in __all__ but missing"


def test_root_reexports_api_functions():
    import jsonyaml
    from jsonyaml import api

    assert jsonyaml.marshal is api.marshal
    assert jsonyaml.unmarshal is api.unmarshal
    assert jsonyaml.yaml_to_json is api.yaml_to_json
    assert jsonyaml.json_to_yaml is api.json_to_yaml


def test_kernel_exports():
    from jsonyaml import kernel

    for name in kernel.__all__:
        assert hasattr(kernel, name)


def test_import_adds_no_log_handlers():
    import jsonyaml  # noqa: F401

    assert not logging.getLogger("jsonyaml").handlers
