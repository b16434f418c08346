from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request, session

from ..common.responses import json_errors
from ..container import Container
from .session import SessionContext


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    @json_errors
    def login():
        payload = request.get_json(silent=True) or request.form
        ctx = container.auth_service.authenticate(payload.get("username", ""), payload.get("password", ""))

        session.clear()
        session.permanent = bool(payload.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=7)
        session.update(ctx.to_session())

        return jsonify({"success": True, "data": ctx.to_session()})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/me", methods=["GET"], endpoint="me")
    @json_errors
    def me():
        ctx = SessionContext.from_session(session)
        ctx.require_login()
        return jsonify({"success": True, "data": ctx.to_session()})
