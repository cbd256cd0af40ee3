"""CQRS dependency factories.

Application-scoped singletons for the buses, execution loggers and
builder factories. Handlers are registered on the buses by the
application at startup:

    get_command_bus().register_handlers(RegisterUserHandler(users))
    user_id = await get_command_factory().create(RegisterUser).name("John").execute()
"""

from functools import lru_cache

from cqrs_factory.application.cqrs.factory import CommandFactory, QueryFactory
from cqrs_factory.core.container.infrastructure import get_logger
from cqrs_factory.infrastructure.bus import CommandBus, QueryBus
from cqrs_factory.infrastructure.logging import CommandLogger, QueryLogger


@lru_cache()
def get_command_bus() -> CommandBus:
    return CommandBus()


@lru_cache()
def get_query_bus() -> QueryBus:
    return QueryBus()


@lru_cache()
def get_command_logger() -> CommandLogger:
    return CommandLogger(get_logger())


@lru_cache()
def get_query_logger() -> QueryLogger:
    return QueryLogger(get_logger())


@lru_cache()
def get_command_factory() -> CommandFactory:
    """Get command factory singleton (app-scoped).

    Builders it creates dispatch to ``get_command_bus()`` and log through
    ``get_command_logger()``.
    """
    return CommandFactory(get_command_logger(), get_command_bus())


@lru_cache()
def get_query_factory() -> QueryFactory:
    """Get query factory singleton (app-scoped).

    Builders it creates dispatch to ``get_query_bus()`` and log through
    ``get_query_logger()``.
    """
    return QueryFactory(get_query_logger(), get_query_bus())
