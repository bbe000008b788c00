import copy
import os
import yaml
from typing import Any

class Config:
    _config_path = os.path.join(os.path.dirname(__file__), 'config.yaml')
    _DEFAULTS = {
        'debug': False,
        'converter': {
            'strict_stem_mutation': True,
        },
    }
    _ERROR_MESSAGES = {
        'invalid_format': "設定ファイルの形式が正しくありません: {}",
        'invalid_section': "設定ファイルのセクションが正しくありません: {}",
    }

    @classmethod
    def _handle_config_errors(cls, error: Exception) -> None:
        if isinstance(error, yaml.YAMLError):
            raise ValueError(cls._ERROR_MESSAGES['invalid_format'].format(cls._config_path)) from error
        raise error

    @classmethod
    def _merge(cls, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged = copy.deepcopy(base)
        for key, value in override.items():
            if isinstance(merged.get(key), dict):
                if not isinstance(value, dict):
                    raise ValueError(cls._ERROR_MESSAGES['invalid_section'].format(key))
                merged[key] = cls._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    @classmethod
    def default_config(cls) -> dict[str, Any]:
        return copy.deepcopy(cls._DEFAULTS)

    @classmethod
    def load_config(cls) -> dict[str, Any]:
        if not os.path.exists(cls._config_path):
            return cls.default_config()

        try:
            with open(cls._config_path, encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except Exception as e:
            cls._handle_config_errors(e)

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(cls._ERROR_MESSAGES['invalid_format'].format(cls._config_path))
        return cls._merge(cls._DEFAULTS, loaded)
