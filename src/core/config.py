"""
Configuration module.

Contains Pydantic-based configuration classes for the naming engine.
"""

import os
import json
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.domain.value_objects import ColonReplacementFormat, MultiEpisodeStyle
from src.core.presets import get_preset


class NamingConfig(BaseModel):
    """
    Naming configuration.

    Loaded once and read-only while names are rendered. Templates are
    validated when the model is built.
    """

    model_config = ConfigDict(frozen=True)

    # Episode templates by series type
    standard_episode_format: str = (
        '{Series Title} - S{Season:00}E{Episode:00} - {Episode Title} [{Quality Full}]'
    )
    daily_episode_format: str = (
        '{Series Title} - {Air-Date} - {Episode Title} [{Quality Full}]'
    )
    anime_episode_format: str = (
        '{Series Title} - S{Season:00}E{Episode:00} - {Absolute Episode:000} - '
        '{Episode Title} [{Quality Full}]'
    )

    # Folder templates
    series_folder_format: str = '{Series Title} ({Year})'
    season_folder_format: str = 'Season {Season:00}'
    specials_folder_format: str = 'Specials'

    # Movie templates
    movie_format: str = '{Movie Title} ({Movie Year}) [{Quality Full}]'
    movie_folder_format: str = '{Movie Title} ({Movie Year})'

    multi_episode_style: MultiEpisodeStyle = MultiEpisodeStyle.PREFIXED_RANGE
    colon_replacement_format: ColonReplacementFormat = ColonReplacementFormat.SMART

    rename_episodes: bool = True
    replace_illegal_characters: bool = True
    replace_spaces: bool = False
    spaces_replacement: str = '.'
    include_quality: bool = True
    include_edition: bool = True

    TEMPLATE_FIELDS: ClassVar[tuple[str, ...]] = (
        'standard_episode_format',
        'daily_episode_format',
        'anime_episode_format',
        'series_folder_format',
        'season_folder_format',
        'specials_folder_format',
        'movie_format',
        'movie_folder_format',
    )

    @model_validator(mode='after')
    def validate_templates(self) -> 'NamingConfig':
        """Reject templates with malformed token modifiers."""
        from src.core.exceptions import ConfigurationError
        from src.services.naming.modifier_parser import ModifierParser
        from src.services.naming.template_tokenizer import TemplateTokenizer

        tokenizer = TemplateTokenizer()
        parser = ModifierParser()
        for field_name in self.TEMPLATE_FIELDS:
            template = getattr(self, field_name)
            for occurrence in tokenizer.tokenize(template):
                try:
                    parser.validate(occurrence.content)
                except ConfigurationError as e:
                    raise ConfigurationError(
                        e.message, field_name=field_name, field_value=template
                    ) from e
        return self

    @classmethod
    def from_preset(cls, preset_name: str, **overrides: Any) -> 'NamingConfig':
        """
        Build a naming configuration from a built-in preset.

        Args:
            preset_name: Preset name ('Plex', 'Kodi', 'Minimal', 'Scene').
            **overrides: Fields that take precedence over the preset.

        Returns:
            NamingConfig.
        """
        fields = get_preset(preset_name).to_naming_fields()
        fields.update(overrides)
        return cls(**fields)


class AppConfig(BaseSettings):
    """主应用配置"""

    naming: NamingConfig = Field(default_factory=NamingConfig)
    # 内置命名预设名称，naming 中显式设置的字段优先
    preset: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix='MEDIANAMER_',
        env_nested_delimiter='__'
    )

    @model_validator(mode='before')
    @classmethod
    def apply_preset(cls, data: Any) -> Any:
        """将预设模板合并到 naming 配置"""
        if not isinstance(data, dict) or not data.get('preset'):
            return data

        naming = data.get('naming') or {}
        if isinstance(naming, NamingConfig):
            naming = naming.model_dump(exclude_unset=True)

        merged: Dict[str, Any] = get_preset(data['preset']).to_naming_fields()
        merged.update(naming)
        return {**data, 'naming': merged}

    def get(self, key: str, default=None):
        """获取配置值，支持点分隔的嵌套键"""
        value = self
        for k in key.split('.'):
            if not hasattr(value, k):
                return default
            value = getattr(value, k)
        return value

    def set(self, key: str, value) -> bool:
        """
        设置配置值，支持点分隔的嵌套键

        naming 是只读模型，修改其字段时会重新构建并校验模板，
        模板无效时抛出 ConfigurationError。
        设置 preset 时用预设模板覆盖 naming 中对应字段，其余字段保持不变；
        预设不存在时抛出 PresetNotFoundError。
        """
        keys = key.split('.')
        if keys == ['preset']:
            if value:
                fields = self.naming.model_dump()
                fields.update(get_preset(value).to_naming_fields())
                self.naming = NamingConfig(**fields)
            self.preset = value
            return True

        if len(keys) == 1:
            if keys[0] not in type(self).model_fields:
                return False
            setattr(self, keys[0], value)
            return True

        if len(keys) == 2 and keys[0] == 'naming':
            if keys[1] not in NamingConfig.model_fields:
                return False
            fields = self.naming.model_dump()
            fields[keys[1]] = value
            self.naming = NamingConfig(**fields)
            return True

        return False

    @classmethod
    def load(cls, config_path: str = None) -> 'AppConfig':
        """加载配置"""
        if config_path is None:
            config_path = os.getenv('CONFIG_PATH', 'config.json')

        if os.path.exists(config_path):
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
            return cls(**config_data)

        return cls()

    def save(self, config_path: str = None):
        """保存配置"""
        if config_path is None:
            config_path = os.getenv('CONFIG_PATH', 'config.json')

        with open(config_path, 'w', encoding='utf-8') as f:
            f.write(self.model_dump_json(indent=2))


# 全局配置实例
config = AppConfig.load()
