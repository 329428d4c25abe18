"""
Dependency Injection Container module.

Contains the Container class that wires the naming engine services.
"""

from dependency_injector import containers, providers

from src.core.config import config
from src.services.naming.modifier_parser import ModifierParser
from src.services.naming.multi_episode_detector import MultiEpisodeDetector
from src.services.naming.multi_episode_encoder import MultiEpisodeEncoder
from src.services.naming.namers import (
    EpisodeFileNamer,
    MovieFileNamer,
    MovieFolderNamer,
    SeasonFolderNamer,
    SeriesFolderNamer,
)
from src.services.naming.naming_service import NamingService
from src.services.naming.sanitizer import FilenameSanitizer
from src.services.naming.template_renderer import TemplateRenderer
from src.services.naming.template_tokenizer import TemplateTokenizer
from src.services.naming.token_resolver import TokenResolver


class Container(containers.DeclarativeContainer):
    """
    依赖注入容器。

    管理命名引擎所有服务的生命周期和注入。

    服务层次结构:
    1. Configuration (命名配置)
    2. Template Engine (模板解析与渲染)
    3. Sanitization & Multi-Episode (清理与多集处理)
    4. Namers (文件名/文件夹名生成)
    5. Naming Service (统一入口)
    """

    # ===== Configuration =====
    # 测试中可通过 container.naming_config.override(...) 替换
    naming_config = providers.Object(config.naming)

    # ===== Template Engine =====
    tokenizer = providers.Singleton(TemplateTokenizer)
    modifier_parser = providers.Singleton(ModifierParser)
    token_resolver = providers.Singleton(
        TokenResolver,
        naming_config=naming_config
    )
    renderer = providers.Singleton(
        TemplateRenderer,
        tokenizer=tokenizer,
        modifier_parser=modifier_parser,
        token_resolver=token_resolver
    )

    # ===== Sanitization & Multi-Episode =====
    sanitizer = providers.Singleton(
        FilenameSanitizer,
        naming_config=naming_config
    )
    encoder = providers.Singleton(MultiEpisodeEncoder)
    detector = providers.Singleton(MultiEpisodeDetector)

    # ===== Namers =====
    episode_namer = providers.Singleton(
        EpisodeFileNamer,
        naming_config=naming_config,
        renderer=renderer,
        sanitizer=sanitizer,
        encoder=encoder
    )
    series_folder_namer = providers.Singleton(
        SeriesFolderNamer,
        naming_config=naming_config,
        renderer=renderer,
        sanitizer=sanitizer
    )
    season_folder_namer = providers.Singleton(
        SeasonFolderNamer,
        naming_config=naming_config,
        renderer=renderer,
        sanitizer=sanitizer
    )
    movie_namer = providers.Singleton(
        MovieFileNamer,
        naming_config=naming_config,
        renderer=renderer,
        sanitizer=sanitizer
    )
    movie_folder_namer = providers.Singleton(
        MovieFolderNamer,
        naming_config=naming_config,
        renderer=renderer,
        sanitizer=sanitizer
    )

    # ===== Naming Service =====
    naming_service = providers.Singleton(
        NamingService,
        episode_namer=episode_namer,
        series_folder_namer=series_folder_namer,
        season_folder_namer=season_folder_namer,
        movie_namer=movie_namer,
        movie_folder_namer=movie_folder_namer,
        detector=detector
    )


# 全局容器实例
container = Container()
