"""
Unit tests for the provisionable i18n module and its template functions
"""

import logging

import pytest

from i18n_resolver.config.block import parse_config_block
from i18n_resolver.config.settings import I18nSettings
from i18n_resolver.exceptions import (
    MalformedDocumentError,
    ProvisionError,
    SourceNotFoundError,
)
from i18n_resolver.i18n import TRANSLATE_FUNCTION_NAME, DictionaryStore, I18nModule


@pytest.mark.unit
class TestI18nModuleProvision:
    """Test provisioning from a dictionary file"""

    def test_provision_loads_dictionary(self, write_dict_file, sample_dictionary):
        module = I18nModule(dict_file=write_dict_file(sample_dictionary))

        module.provision()

        assert module.provisioned is True
        assert len(module.store) == len(sample_dictionary)
        assert module.translate("hello", "de") == "Hallo"

    def test_provision_logs_success(self, write_dict_file, caplog):
        module = I18nModule(dict_file=write_dict_file({"hello": {"en": "Hello"}}))

        with caplog.at_level(logging.INFO, logger="i18n_resolver.i18n.module"):
            module.provision()

        assert any("i18n dictionary loaded successfully" in r.getMessage() for r in caplog.records)

    def test_provision_missing_file(self, tmp_path):
        module = I18nModule(dict_file=str(tmp_path / "nonexistent" / "dict.json"))

        with pytest.raises(ProvisionError) as exc_info:
            module.provision()

        assert isinstance(exc_info.value.__cause__, SourceNotFoundError)
        assert exc_info.value.code == "PROVISION_ERROR"
        assert exc_info.value.details["code"] == "SOURCE_NOT_FOUND"
        assert "failed to load i18n dictionary" in str(exc_info.value)
        assert module.provisioned is False

    def test_provision_empty_dictionary(self, write_dict_file):
        module = I18nModule(dict_file=write_dict_file("{}"))

        module.provision()

        assert len(module.store) == 0
        assert module.translate("hello", "de") == "hello"

    def test_provision_invalid_json(self, write_dict_file):
        module = I18nModule(dict_file=write_dict_file("{invalid json}"))

        with pytest.raises(ProvisionError) as exc_info:
            module.provision()

        assert isinstance(exc_info.value.__cause__, MalformedDocumentError)

    def test_provision_oversized_number_is_provision_error(self, write_dict_file):
        module = I18nModule(dict_file=write_dict_file('{"a": {"en": ' + "1" * 5000 + "}}"))

        with pytest.raises(ProvisionError) as exc_info:
            module.provision()

        assert isinstance(exc_info.value.__cause__, MalformedDocumentError)

    def test_provision_without_dict_file(self):
        module = I18nModule()

        module.provision()

        assert module.provisioned is True
        assert len(module.store) == 0
        assert module.translate("any.key", "en", 1) == "any.key"

    def test_blank_dict_file_is_unset(self):
        assert I18nModule(dict_file="").dict_file is None

    def test_cleanup_drops_dictionary(self, write_dict_file):
        module = I18nModule(dict_file=write_dict_file({"hello": {"en": "Hello"}}))
        module.provision()

        module.cleanup()

        assert module.provisioned is False
        assert len(module.store) == 0

    def test_injected_store_is_used(self, write_dict_file):
        store = DictionaryStore()
        module = I18nModule(dict_file=write_dict_file({"hello": {"en": "Hello"}}), store=store)

        module.provision()

        assert store.lookup("hello", "en") == "Hello"

    def test_from_settings(self, write_dict_file):
        path = write_dict_file({"hello": {"en": "Hello"}})

        module = I18nModule.from_settings(I18nSettings(dict_file=path))

        assert module.dict_file == path

    def test_from_config_block(self):
        block = parse_config_block("i18n {\n  dict_file /etc/i18n/translations.json\n}")

        module = I18nModule.from_config_block(block)

        assert module.dict_file == "/etc/i18n/translations.json"


@pytest.mark.unit
class TestTemplateFunctions:
    """Test the function map exposed to template engines"""

    @pytest.fixture
    def translate_func(self, write_dict_file, sample_dictionary):
        module = I18nModule(dict_file=write_dict_file(sample_dictionary))
        module.provision()
        return module.template_functions()[TRANSLATE_FUNCTION_NAME]

    def test_function_name(self):
        assert set(I18nModule().template_functions()) == {"i18nTranslate"}

    def test_module_id(self):
        assert I18nModule.MODULE_ID == "http.handlers.templates.functions.i18n"

    def test_translate_basic(self, translate_func):
        assert translate_func("hello", "de") == "Hallo"
        assert translate_func("hello", "en") == "Hello"

    def test_translate_with_nested_argument(self, translate_func):
        assert translate_func("error.invalidAmount", "de", "i18n:account") == "Ungültiger Betrag: Konto"

    def test_translate_never_raises_for_missing_data(self, translate_func):
        assert translate_func("missing", "xx", object()) == "missing"

    def test_function_sees_later_provisioning(self, write_dict_file):
        module = I18nModule(dict_file=write_dict_file({"hello": {"en": "Hello"}}))
        func = module.template_functions()[TRANSLATE_FUNCTION_NAME]

        assert func("hello", "en") == "hello"
        module.provision()
        assert func("hello", "en") == "Hello"
