from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv

# DATABASE_URL may live in .env next to alembic.ini
load_dotenv()

from app.core.config import settings  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.db.session import make_engine  # noqa: E402
import app.models.user  # noqa: F401,E402
import app.models.profile  # noqa: F401,E402
import app.models.job  # noqa: F401,E402
import app.models.match  # noqa: F401,E402
import app.models.path  # noqa: F401,E402
import app.models.application  # noqa: F401,E402

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
# "-x db_url=..." overrides the configured database
db_url = context.get_x_argument(as_dictionary=True).get("db_url", settings.DATABASE_URL)


def run_migrations_offline():
    context.configure(
        url=db_url,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        render_as_batch=db_url.startswith("sqlite"),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    engine = make_engine(db_url)
    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                compare_type=True,
                # SQLite can only alter tables by copy-and-move
                render_as_batch=connection.dialect.name == "sqlite",
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
