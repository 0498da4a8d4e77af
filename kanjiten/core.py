from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from kanjiten.application.learning.use_cases.custom_word_use_case import CustomWordUseCase
from kanjiten.application.learning.use_cases.progress_use_case import ProgressUseCase
from kanjiten.application.learning.use_cases.streak_use_case import StreakUseCase
from kanjiten.application.settings.use_cases.settings_use_case import SettingsUseCase
from kanjiten.config import get_settings
from kanjiten.domain.learning.services.streak_calculator import StreakCalculator
from kanjiten.domain.settings.services.settings_resolver import SettingsResolver
from kanjiten.infrastructure.learning.repositories.custom_word_repository import (
    CustomWordRepository,
)
from kanjiten.infrastructure.learning.repositories.progress_repository import ProgressRepository
from kanjiten.infrastructure.learning.repositories.streak_repository import StreakRepository
from kanjiten.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from kanjiten.infrastructure.settings.repositories.settings_repository import (
    SettingsRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Callable(get_settings)

    # Repositories and unit of work share the request session
    progress_repository = providers.Factory(ProgressRepository, db=db)
    streak_repository = providers.Factory(StreakRepository, db=db)
    settings_repository = providers.Factory(SettingsRepository, db=db)
    custom_word_repository = providers.Factory(CustomWordRepository, db=db)
    unit_of_work = providers.Factory(SqlAlchemyUnitOfWork, db=db)

    # Domain services (pure domain logic, no db)
    streak_calculator = providers.Factory(StreakCalculator)
    settings_resolver = providers.Factory(SettingsResolver)

    # Learning module, application use cases
    progress_use_case = providers.Factory(
        ProgressUseCase,
        progress_repository=progress_repository,
        uow=unit_of_work,
        max_batch_size=settings.provided.MAX_BULK_ITEMS,
    )
    streak_use_case = providers.Factory(
        StreakUseCase,
        streak_repository=streak_repository,
        uow=unit_of_work,
        streak_calculator=streak_calculator,
        max_attempts=settings.provided.STREAK_MAX_ATTEMPTS,
    )
    custom_word_use_case = providers.Factory(
        CustomWordUseCase,
        custom_word_repository=custom_word_repository,
        uow=unit_of_work,
        max_words_per_kanji=settings.provided.MAX_CUSTOM_WORDS_PER_KANJI,
    )

    # Settings module, application use cases
    settings_use_case = providers.Factory(
        SettingsUseCase,
        settings_repository=settings_repository,
        uow=unit_of_work,
        settings_resolver=settings_resolver,
    )


# Initialize container
container = Container()
