"""Variant profiles: everything that differs between enum choices.

Each configuration dimension with more than two values (database, validation
library, logger) maps every enum member to a frozen profile.  Composers and
templates read vocabulary from the active profile instead of branching on the
enum value, so adding a variant means adding one table entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from backend_forge.config import Database, Language, Logger, Validation


LANGUAGE_LABELS: dict[Language, str] = {
    Language.TYPESCRIPT: "TypeScript",
    Language.JAVASCRIPT: "JavaScript",
}


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OrmExamples:
    """Illustrative data-access calls shown in the services documentation stub.

    Each operation is a tuple of source lines.  The stub inserts a not-found
    check on ``user`` after ``find_by_id``, ``update`` and ``delete``; lines in
    ``delete_after_check`` follow that check.
    """

    import_ts: str | None
    import_js: str | None
    find_all: tuple[str, ...]
    find_by_id: tuple[str, ...]
    create: tuple[str, ...]
    update: tuple[str, ...]
    delete: tuple[str, ...]
    delete_after_check: tuple[str, ...] = ()


@dataclass(frozen=True)
class ComposeService:
    """Database service block for ``docker-compose.yml``.

    Values may contain ``{name}``, replaced with the project name.
    """

    name: str
    image: str
    container_port: int
    host_port: str
    volume: str
    data_path: str
    environment: tuple[tuple[str, str], ...] = ()
    app_environment: tuple[tuple[str, str], ...] = ()

    def environment_for(self, project_name: str) -> list[tuple[str, str]]:
        return [(k, v.replace("{name}", project_name)) for k, v in self.environment]

    def app_environment_for(self, project_name: str) -> list[tuple[str, str]]:
        return [(k, v.replace("{name}", project_name)) for k, v in self.app_environment]


@dataclass(frozen=True)
class DatabaseProfile:
    key: Database
    label: str
    summary_label: str
    family: str  # "none", "document" or "relational"
    orm: OrmExamples
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    dialect: str | None = None
    url_scheme: str | None = None
    engine: str | None = None
    connect_function: str | None = None
    default_port: int | None = None
    default_user: str | None = None
    default_password: str | None = None
    connection_template: str | None = None
    models_template: str | None = None
    compose: ComposeService | None = None
    next_steps: tuple[str, ...] = ()

    @property
    def enabled(self) -> bool:
        return self.family != "none"

    @property
    def is_relational(self) -> bool:
        return self.family == "relational"


_MONGOOSE_ORM = OrmExamples(
    import_ts="import { User } from '../models/user.model';",
    import_js="const User = require('../models/user.model');",
    find_all=("return await User.find().select('-password');",),
    find_by_id=("const user = await User.findById(id).select('-password');",),
    create=("return await User.create(data);",),
    update=("const user = await User.findByIdAndUpdate(id, data, { new: true });",),
    delete=("const user = await User.findByIdAndDelete(id);",),
)

_SEQUELIZE_ORM = OrmExamples(
    import_ts="import { User } from '../models/user.model';",
    import_js="const { User } = require('../models/user.model');",
    find_all=("return await User.findAll({ attributes: { exclude: ['password'] } });",),
    find_by_id=("const user = await User.findByPk(id);",),
    create=("return await User.create(data);",),
    update=(
        "await User.update(data, { where: { id } });",
        "const user = await User.findByPk(id);",
    ),
    delete=("const user = await User.findByPk(id);",),
    delete_after_check=("await user.destroy();",),
)

_NO_ORM = OrmExamples(
    import_ts=None,
    import_js=None,
    find_all=("return []; // Database query here",),
    find_by_id=("const user = null; // Database query here",),
    create=("return data; // Create record",),
    update=("const user = null; // Update record",),
    delete=("const user = null; // Delete record",),
)

_SEQUELIZE_DEPS = {"sequelize": "^6.35.2"}
_SEQUELIZE_DEV_DEPS = {"sequelize-cli": "^6.6.2"}
_RELATIONAL_NEXT_STEPS = (
    "Create a database in your DBMS",
    "Update database name and credentials in .env",
    "npm run db:migrate",
)

DATABASE_PROFILES: dict[Database, DatabaseProfile] = {
    Database.NONE: DatabaseProfile(
        key=Database.NONE,
        label="No Database",
        summary_label="None",
        family="none",
        orm=_NO_ORM,
    ),
    Database.MONGODB: DatabaseProfile(
        key=Database.MONGODB,
        label="MongoDB + Mongoose",
        summary_label="MongoDB (Mongoose)",
        family="document",
        engine="MongoDB",
        connect_function="connectDB",
        orm=_MONGOOSE_ORM,
        dependencies={"mongoose": "^8.0.3"},
        default_port=27017,
        connection_template="database/mongoose",
        models_template="models/mongoose",
        compose=ComposeService(
            name="mongodb",
            image="mongo:7",
            container_port=27017,
            host_port="27017",
            volume="mongodb_data",
            data_path="/data/db",
            app_environment=(("MONGODB_URI", "mongodb://mongodb:27017/{name}"),),
        ),
        next_steps=("Configure MONGODB_URI in .env",),
    ),
    Database.POSTGRESQL: DatabaseProfile(
        key=Database.POSTGRESQL,
        label="PostgreSQL + Sequelize",
        summary_label="PostgreSQL (Sequelize)",
        family="relational",
        orm=_SEQUELIZE_ORM,
        dependencies={**_SEQUELIZE_DEPS, "pg": "^8.11.3", "pg-hstore": "^2.3.4"},
        dev_dependencies=dict(_SEQUELIZE_DEV_DEPS),
        dialect="postgres",
        url_scheme="postgresql",
        engine="PostgreSQL",
        connect_function="connectDatabase",
        default_port=5432,
        default_user="postgres",
        default_password="root",
        connection_template="database/sequelize",
        models_template="models/sequelize",
        compose=ComposeService(
            name="postgres",
            image="postgres:16",
            container_port=5432,
            host_port="${DB_PORT:-5432}",
            volume="postgres_data",
            data_path="/var/lib/postgresql/data",
            environment=(
                ("POSTGRES_DB", "${DB_NAME:-{name}}"),
                ("POSTGRES_USER", "${DB_USER:-postgres}"),
                ("POSTGRES_PASSWORD", "${DB_PASSWORD:-root}"),
            ),
            app_environment=(("DB_HOST", "postgres"),),
        ),
        next_steps=_RELATIONAL_NEXT_STEPS,
    ),
    Database.MYSQL: DatabaseProfile(
        key=Database.MYSQL,
        label="MySQL + Sequelize",
        summary_label="MySQL (Sequelize)",
        family="relational",
        orm=_SEQUELIZE_ORM,
        dependencies={**_SEQUELIZE_DEPS, "mysql2": "^3.6.5"},
        dev_dependencies=dict(_SEQUELIZE_DEV_DEPS),
        dialect="mysql",
        url_scheme="mysql",
        engine="MySQL",
        connect_function="connectDatabase",
        default_port=3306,
        default_user="root",
        default_password="password",
        connection_template="database/sequelize",
        models_template="models/sequelize",
        compose=ComposeService(
            name="mysql",
            image="mysql:8",
            container_port=3306,
            host_port="${DB_PORT:-3306}",
            volume="mysql_data",
            data_path="/var/lib/mysql",
            environment=(
                ("MYSQL_DATABASE", "${DB_NAME:-{name}}"),
                ("MYSQL_ROOT_PASSWORD", "${DB_PASSWORD:-password}"),
            ),
            app_environment=(("DB_HOST", "mysql"),),
        ),
        next_steps=_RELATIONAL_NEXT_STEPS,
    ),
}


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidationProfile:
    key: Validation
    label: str
    dependencies: dict[str, str] = field(default_factory=dict)
    docs_template: str | None = None

    @property
    def enabled(self) -> bool:
        return self.docs_template is not None

    @property
    def snippet(self) -> str:
        """Name of the middleware example fragment for this library."""
        return f"validate-{self.key.value}"


VALIDATION_PROFILES: dict[Validation, ValidationProfile] = {
    Validation.NONE: ValidationProfile(key=Validation.NONE, label="None"),
    Validation.ZOD: ValidationProfile(
        key=Validation.ZOD,
        label="Zod",
        dependencies={"zod": "^3.22.4"},
        docs_template="validators/zod",
    ),
    Validation.JOI: ValidationProfile(
        key=Validation.JOI,
        label="Joi",
        dependencies={"joi": "^17.11.0"},
        docs_template="validators/joi",
    ),
}


# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LoggerProfile:
    """Logger choice plus the statement shapes used to log from stubs.

    ``info_format`` / ``error_format`` are ``str.format`` patterns taking
    ``message`` and ``error`` (source expressions, already quoted).
    """

    key: Logger
    label: str
    info_format: str
    error_format: str
    dependencies: dict[str, str] = field(default_factory=dict)
    module_template: str | None = None

    @property
    def enabled(self) -> bool:
        return self.module_template is not None

    def info(self, message: str) -> str:
        return self.info_format.format(message=message)

    def error(self, message: str, error: str) -> str:
        return self.error_format.format(message=message, error=error)


LOGGER_PROFILES: dict[Logger, LoggerProfile] = {
    Logger.NONE: LoggerProfile(
        key=Logger.NONE,
        label="None",
        info_format="console.log({message});",
        error_format="console.error({message}, {error});",
    ),
    Logger.WINSTON: LoggerProfile(
        key=Logger.WINSTON,
        label="Winston",
        info_format="logger.info({message});",
        error_format="logger.error({message}, {error});",
        dependencies={"winston": "^3.11.0"},
        module_template="logger/winston",
    ),
    Logger.PINO: LoggerProfile(
        key=Logger.PINO,
        label="Pino",
        info_format="logger.info({message});",
        error_format="logger.error({error}, {message});",
        dependencies={"pino": "^8.17.2", "pino-pretty": "^10.3.1"},
        module_template="logger/pino",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------

def database_profile(database: Database) -> DatabaseProfile:
    return DATABASE_PROFILES[database]


def validation_profile(validation: Validation) -> ValidationProfile:
    return VALIDATION_PROFILES[validation]


def logger_profile(logger: Logger) -> LoggerProfile:
    return LOGGER_PROFILES[logger]
