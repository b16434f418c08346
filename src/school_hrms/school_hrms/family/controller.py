from __future__ import annotations

from flask import Flask, request, session

from ..common.responses import json_envelope
from ..container import Container
from ..users.session import SessionContext


def register(app: Flask, container: Container) -> None:
    def current_session() -> SessionContext:
        return SessionContext.from_session(session)

    @app.route("/employees/<employee_id>/family", methods=["GET"], endpoint="family_list")
    def family_list(employee_id: str):
        return json_envelope(container.family_service.get_family_data(current_session(), employee_id))

    @app.route("/employees/<employee_id>/family", methods=["POST"], endpoint="family_add")
    def family_add(employee_id: str):
        payload = request.get_json(silent=True) or {}
        envelope = container.family_service.add_family_member(current_session(), employee_id, payload)
        return json_envelope(envelope, success_status=201)

    @app.route("/employees/<employee_id>/family/<int:member_id>", methods=["PUT"], endpoint="family_update")
    def family_update(employee_id: str, member_id: int):
        payload = request.get_json(silent=True) or {}
        return json_envelope(
            container.family_service.update_family_member(current_session(), employee_id, member_id, payload)
        )

    @app.route("/employees/<employee_id>/family/<int:member_id>", methods=["DELETE"], endpoint="family_delete")
    def family_delete(employee_id: str, member_id: int):
        return json_envelope(container.family_service.delete_family_member(current_session(), employee_id, member_id))
