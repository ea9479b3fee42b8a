from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from lexiboard.application.catalog.services.schema_normalizer import SchemaNormalizer
from lexiboard.application.catalog.use_cases.boards.board_items_use_case import BoardItemsUseCase
from lexiboard.application.catalog.use_cases.boards.board_management_use_case import (
    BoardManagementUseCase,
)
from lexiboard.application.catalog.use_cases.lessons.lesson_management_use_case import (
    LessonManagementUseCase,
)
from lexiboard.application.catalog.use_cases.records.create_record_use_case import (
    CreateRecordUseCase,
)
from lexiboard.application.catalog.use_cases.records.delete_record_use_case import (
    DeleteRecordUseCase,
)
from lexiboard.application.catalog.use_cases.records.fetch_word_use_case import FetchWordUseCase
from lexiboard.application.catalog.use_cases.records.get_record_use_case import GetRecordUseCase
from lexiboard.application.catalog.use_cases.records.search_records_use_case import (
    SearchRecordsUseCase,
)
from lexiboard.application.catalog.use_cases.records.update_record_use_case import (
    UpdateRecordUseCase,
)
from lexiboard.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from lexiboard.config import get_settings
from lexiboard.domain.catalog.services.record_validator import RecordValidator
from lexiboard.infrastructure.catalog.repositories import (
    BoardRepository,
    LessonRepository,
    RecordRepository,
)
from lexiboard.infrastructure.catalog.services.dictionary_service import DictionaryApiService
from lexiboard.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from lexiboard.infrastructure.identity.services.token_service import TokenServiceAdapter


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Transaction boundary
    uow = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Repositories
    record_repository = providers.Factory(RecordRepository, db=db)
    board_repository = providers.Factory(BoardRepository, db=db)
    lesson_repository = providers.Factory(LessonRepository, db=db)

    # External services; the dictionary keeps its lookup cache for the process lifetime
    dictionary_service = providers.Singleton(
        DictionaryApiService,
        base_url=settings.provided.DICTIONARY_API_URL,
        timeout=settings.provided.DICTIONARY_TIMEOUT_SECONDS,
        cache_ttl_seconds=settings.provided.DICTIONARY_CACHE_TTL_SECONDS,
        cache_max_entries=settings.provided.DICTIONARY_CACHE_MAX_ENTRIES,
    )
    token_service = providers.Factory(TokenServiceAdapter)

    # Domain and application services
    record_validator = providers.Factory(RecordValidator)
    schema_normalizer = providers.Factory(SchemaNormalizer, dictionary=dictionary_service)

    # Record use cases
    create_record_use_case = providers.Factory(
        CreateRecordUseCase,
        record_repository=record_repository,
        normalizer=schema_normalizer,
        validator=record_validator,
        uow=uow,
    )
    update_record_use_case = providers.Factory(
        UpdateRecordUseCase,
        record_repository=record_repository,
        normalizer=schema_normalizer,
        validator=record_validator,
        uow=uow,
    )
    delete_record_use_case = providers.Factory(
        DeleteRecordUseCase,
        record_repository=record_repository,
        board_repository=board_repository,
        uow=uow,
    )
    get_record_use_case = providers.Factory(GetRecordUseCase, record_repository=record_repository)
    search_records_use_case = providers.Factory(
        SearchRecordsUseCase, record_repository=record_repository
    )
    fetch_word_use_case = providers.Factory(FetchWordUseCase, normalizer=schema_normalizer)

    # Board and lesson use cases
    board_management_use_case = providers.Factory(
        BoardManagementUseCase, board_repository=board_repository, uow=uow
    )
    board_items_use_case = providers.Factory(
        BoardItemsUseCase,
        board_repository=board_repository,
        record_repository=record_repository,
        uow=uow,
    )
    lesson_management_use_case = providers.Factory(
        LessonManagementUseCase,
        lesson_repository=lesson_repository,
        board_repository=board_repository,
        uow=uow,
    )

    # Identity
    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        admin_username=settings.provided.ADMIN_USERNAME,
        admin_password=settings.provided.ADMIN_PASSWORD,
        token_service=token_service,
    )


container = Container()
