# app.py - Agenda API

import logging
from datetime import datetime as _dt
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest, MethodNotAllowed

from agenda import AgendaError, AppointmentInterpreter, Strictness
from config import Settings
from crud import create_appointment
from database import db_session, make_session_factory
from logger import setup_logging
from schemas import AppointmentOut, ConfirmationResponse, ErrorResponse, MessageRequest

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, clock=None, session_factory=None, fallback=None) -> Flask:
    """
    Build the API. Every collaborator can be injected (tests pass a fixed
    clock and an in-memory database); otherwise they come from Settings.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    interpreter = AppointmentInterpreter(
        settings.zone, settings.parse_mode, clock=clock, fallback=fallback
    )
    if session_factory is None:
        session_factory = make_session_factory(settings.database_url)

    app = Flask(__name__)
    CORS(app)
    app.config["SETTINGS"] = settings
    app.extensions["interpreter"] = interpreter
    app.extensions["session_factory"] = session_factory

    def _schedule(forced_mode: Optional[Strictness] = None):
        data = request.get_json(force=True)
        if not isinstance(data, dict):
            data = {}
        try:
            payload = MessageRequest.model_validate(data)
        except ValidationError as e:
            logger.warning("invalid payload: %s", e.errors())
            body = ErrorResponse(error="Requisição inválida", kind=None)
            return jsonify(body.model_dump()), 400

        mode = forced_mode or payload.modo or settings.parse_mode
        draft = interpreter.interpret(payload.mensagem, mode)
        with db_session(session_factory) as db:
            appt = create_appointment(db, draft)
            stored = AppointmentOut.model_validate(appt)

        body = ConfirmationResponse(mensagem=interpreter.confirmation(draft), compromisso=stored)
        return jsonify(body.model_dump(mode="json")), 200

    @app.post("/api/ia")
    def schedule():
        return _schedule()

    # Same rules, no silent normalization.
    @app.post("/api/ia/estrito")
    def schedule_strict():
        return _schedule(Strictness.STRICT)

    @app.get("/health")
    def health():
        return jsonify({"ok": True, "service": "agenda", "time": _dt.now(settings.zone).isoformat()})

    @app.errorhandler(AgendaError)
    def handle_agenda_error(err: AgendaError):
        if err.is_client_error:
            logger.warning("request rejected: %s (%s)", err.kind.value, err.message)
            status = 400
        else:
            logger.error("storage failure: %s", err.message)
            status = 500
        return jsonify(ErrorResponse(**err.to_dict()).model_dump()), status

    # JSON/error handler for bad JSON bodies
    @app.errorhandler(BadRequest)
    def handle_400(err):
        return jsonify({"error": "Bad Request", "details": err.description}), 400

    @app.errorhandler(MethodNotAllowed)
    def handle_405(err):
        resp = jsonify({"error": f"Método {request.method} não permitido"})
        resp.status_code = 405
        if err.valid_methods:
            resp.headers["Allow"] = ", ".join(err.valid_methods)
        return resp

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
