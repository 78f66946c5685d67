# taskboard

A small HTTP service that keeps a list of tasks. Each task has a title, an
optional description, a status (`Pending`, `Doing` or `Done`) and an optional
due date. Tasks are stored in a SQL database through SQLAlchemy and served as
JSON by a Flask application.

## Installing

```
pip install .
```

The `taskboard` command connects to PostgreSQL. SQLAlchemy needs a PostgreSQL
driver for that (psycopg2 by default). The driver is not installed with this
package, so install it yourself.

## Running the server

The server reads its settings from a `.env` file and from the environment:

```
DB_HOST=localhost
DB_PORT=5432
DB_USER=user
DB_PASSWORD=password
DB_NAME=tasks_db
```

The settings file must exist. If it is missing, the server stops with
`Error loading .env file`. All five variables must be set and non-empty. If one
is missing, the server stops with a message such as `DB_HOST is not set`.
`DB_PORT` must be a whole number.

Start the service with:

```
taskboard
```

It creates the `tasks` table if needed. It then serves the API with Flask's
built-in server on `0.0.0.0:8080`.

Options:

- `--env-file PATH`: the settings file to load (default `.env`)
- `--host ADDRESS`: the address to listen on (default `0.0.0.0`)
- `--port PORT`: the port to listen on (default `8080`)

## Endpoints

| Method   | Path          | Purpose                      |
|----------|---------------|------------------------------|
| `POST`   | `/tasks`      | Create a task                |
| `GET`    | `/tasks/<id>` | Fetch one task               |
| `GET`    | `/tasks`      | List tasks, paged and sorted |
| `PATCH`  | `/tasks/<id>` | Change some fields of a task |
| `DELETE` | `/tasks/<id>` | Remove a task                |

An id must be a non-negative whole number no larger than 4294967295. Any other
id gives `400` with the detail `Invalid ID`.

### Creating a task

The body is a JSON object. `title` is required and must not be empty.
`description` and `due_at` are optional. `due_at` is an RFC 3339 timestamp and
must carry a time zone offset or `Z`. New tasks start as `Pending`.

```json
{"title": "Write report", "description": "Quarterly numbers", "due_at": "2030-01-31T17:00:00Z"}
```

### Task shape

```json
{
  "ID": 1,
  "Title": "Write report",
  "Description": "Quarterly numbers",
  "Status": "Pending",
  "CreatedAt": "2030-01-01T09:00:00+00:00",
  "UpdatedAt": "2030-01-01T09:00:00+00:00",
  "DueAt": "2030-01-31T17:00:00+00:00"
}
```

Timestamps are ISO 8601 strings. A missing due date is `null`.

### Updating a task

Send only the fields you want to change: `title`, `description`, `status` or
`due_at`.

- An empty `title` leaves the title as it was.
- `status` must be one of `Pending`, `Doing` or `Done`. Any other value gives
  `400` with the detail `Invalid status`.
- A task that does not exist gives `500` with the message
  `Failed to update task`.

### Deleting a task

A successful delete replies with `{"success": true, "data": "Task deleted"}`.
Deleting an id that has no task also succeeds.

### Listing tasks

Query parameters:

- `page` and `page_size`: whole numbers. If absent or `0`, they default to
  `1` and `10`. A negative value or a non-number gives `400`.
- `search`: matches text in the title or description (SQL `LIKE`)
- `sort_by`: `title`, `due_at` or `created_at`
- `sort_order`: `asc` or `desc`
- `status`: `Pending`, `Doing` or `Done`

Sorting needs both `sort_by` and `sort_order`. Without both, the newest tasks
come first.

The result carries the page of tasks and the paging figures:

```json
{
  "success": true,
  "data": {
    "tasks": [],
    "meta": {"total": 0, "page": 1, "page_size": 10, "total_pages": 0}
  }
}
```

### Responses

Every successful response has the shape `{"success": true, "data": ...}`.
Failures look like this:

```json
{"success": false, "error": {"code": 400, "message": "Error", "detail": "Invalid status"}}
```

The status codes are:

- `400` for a malformed id, body or query.
- `404` for a failed lookup on `GET /tasks/<id>`.
- `500` for other failures of create, list, update or delete.

## Using it from Python

You can put the pieces together yourself. This lets you serve the API from
another WSGI server or use a different database engine:

```python
import os

from taskboard.app import create_app
from taskboard.config import get_db
from taskboard.repository import SqlTaskRepository
from taskboard.service import TaskService

engine = get_db(os.environ)
repo = SqlTaskRepository(engine)
repo.migrate()

app = create_app(TaskService(repo))
```

`SqlTaskRepository` accepts any SQLAlchemy engine, for example one made with
`sqlalchemy.create_engine("sqlite://")`.

You can also use `TaskService` directly, without HTTP:

```python
from taskboard.domain import TaskStatus

task = service.create_task("Write report", "Quarterly numbers", None)
service.update_task(task.id, None, None, TaskStatus.DOING, None)
```

`TaskService.get_task_by_id` raises `taskboard.domain.TaskNotFoundError` when no
task has the given id. `taskboard.config.get_db_config` raises
`taskboard.config.ConfigError` when a setting is missing.

## Limits

- There is no authentication. Anyone who can reach the port can read and
  change every task.
- The `taskboard` command serves with Flask's development server. For anything
  beyond local use, run the application from `create_app` under a production
  WSGI server.