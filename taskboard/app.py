"""Web application wiring and the server entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from .config import ConfigError, get_db
from .handlers import TaskHandler
from .repository import SqlTaskRepository
from .service import TaskService


def setup_routes(app: Flask, handler: TaskHandler) -> None:
    """Register the task endpoints on ``app``."""
    app.add_url_rule("/tasks", "create_task", handler.create_task, methods=["POST"])
    app.add_url_rule("/tasks/<id>", "get_task", handler.get_task, methods=["GET"])
    app.add_url_rule("/tasks", "get_tasks", handler.get_tasks, methods=["GET"])
    app.add_url_rule("/tasks/<id>", "update_task", handler.update_task, methods=["PATCH"])
    app.add_url_rule("/tasks/<id>", "delete_task", handler.delete_task, methods=["DELETE"])


def create_app(service: TaskService) -> Flask:
    """Build the web application around ``service``."""
    app = Flask(__name__)
    setup_routes(app, TaskHandler(service))
    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Load settings, prepare the database and serve the API."""
    parser = argparse.ArgumentParser(prog="taskboard", description="Serve the task API.")
    parser.add_argument("--env-file", default=".env", help="settings file to load")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    args = parser.parse_args(argv)

    env_file = Path(args.env_file)
    if not env_file.is_file():
        raise SystemExit(f"Error loading {env_file} file")
    load_dotenv(env_file)

    try:
        engine = get_db()
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    repo = SqlTaskRepository(engine)
    repo.migrate()
    app = create_app(TaskService(repo))
    app.run(host=args.host, port=args.port)