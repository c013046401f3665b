"""Process-wide dependencies shared by request handlers."""

import logging
from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from src.config import Settings
from src.database import create_db_engine, create_session_factory, init_db

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """Holds the settings and database handles for one running application.

    Built when the application starts and disposed when it stops. Request
    dependencies read it from ``request.app.state.container``.
    """

    settings: Settings
    engine: Engine
    session_factory: sessionmaker

    def close(self) -> None:
        """Release pooled database connections."""
        self.engine.dispose()
        logger.info("Database engine disposed")


def build_container(settings: Settings) -> Container:
    """Create the engine, ensure the schema exists and wrap both in a container."""
    engine = create_db_engine(settings)
    init_db(engine)
    logger.info(f"Database initialized ({engine.url.get_backend_name()})")
    return Container(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
    )
