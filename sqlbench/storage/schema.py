"""
Relational Schema.

Fixed statements shared by every backend: pragmas, DDL, insert templates
and the benchmark queries. Insert templates bind four positional
parameters in column order.
"""

DEFAULT_BUSY_TIMEOUT_MS = 5000

# Full durability and referential checks
PRAGMAS = [
    "PRAGMA journal_mode=DELETE",
    "PRAGMA synchronous=FULL",
    "PRAGMA foreign_keys=1",
]

SCHEMA_DDL = [
    "CREATE TABLE users ("
    "id INTEGER PRIMARY KEY NOT NULL,"
    " created INTEGER NOT NULL,"  # epoch millis
    " email TEXT NOT NULL,"
    " active INTEGER NOT NULL)",  # bool
    "CREATE INDEX users_created ON users(created)",
    "CREATE TABLE articles ("
    "id INTEGER PRIMARY KEY NOT NULL,"
    " created INTEGER NOT NULL,"
    " userId INTEGER NOT NULL REFERENCES users(id),"
    " text TEXT NOT NULL)",
    "CREATE INDEX articles_created ON articles(created)",
    "CREATE INDEX articles_userId ON articles(userId)",
    "CREATE TABLE comments ("
    "id INTEGER PRIMARY KEY NOT NULL,"
    " created INTEGER NOT NULL,"
    " articleId INTEGER NOT NULL REFERENCES articles(id),"
    " text TEXT NOT NULL)",
    "CREATE INDEX comments_created ON comments(created)",
    "CREATE INDEX comments_articleId ON comments(articleId)",
]

INSERT_USER_SQL = "INSERT INTO users(id,created,email,active) VALUES(?,?,?,?)"
INSERT_ARTICLE_SQL = "INSERT INTO articles(id,created,userId,text) VALUES(?,?,?,?)"
INSERT_COMMENT_SQL = "INSERT INTO comments(id,created,articleId,text) VALUES(?,?,?,?)"

SELECT_USERS_SQL = "SELECT id,created,email,active FROM users ORDER BY id"

SELECT_USERS_ARTICLES_COMMENTS_SQL = (
    "SELECT"
    " users.id, users.created, users.email, users.active,"
    " articles.id, articles.created, articles.userId, articles.text,"
    " comments.id, comments.created, comments.articleId, comments.text"
    " FROM users"
    " LEFT JOIN articles ON articles.userId = users.id"
    " LEFT JOIN comments ON comments.articleId = articles.id"
    " ORDER BY users.created, articles.created, comments.created"
)


def busy_timeout_pragma(busy_timeout_ms: int = DEFAULT_BUSY_TIMEOUT_MS) -> str:
    return f"PRAGMA busy_timeout={int(busy_timeout_ms)}"


def schema_statements(busy_timeout_ms: int = DEFAULT_BUSY_TIMEOUT_MS) -> list[str]:
    """
    Statements that set up a fresh database.

    Args:
        busy_timeout_ms: Lock wait ceiling applied to the connection

    Returns:
        Pragmas followed by table and index DDL, in execution order
    """
    return PRAGMAS + [busy_timeout_pragma(busy_timeout_ms)] + SCHEMA_DDL


def connection_statements(busy_timeout_ms: int = DEFAULT_BUSY_TIMEOUT_MS) -> list[str]:
    """Per-connection pragmas for a reader opening an existing database."""
    return ["PRAGMA foreign_keys=1", busy_timeout_pragma(busy_timeout_ms)]
