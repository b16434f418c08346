from __future__ import annotations

from flask import Flask, request, session

from ..common.responses import json_envelope
from ..container import Container
from ..users.session import SessionContext


def register(app: Flask, container: Container) -> None:
    @app.route("/candidates/<candidate_id>/employee-info", methods=["POST"], endpoint="employee_info_submit")
    def employee_info_submit(candidate_id: str):
        payload = request.get_json(silent=True) or {}
        envelope = container.onboarding_service.submit_employee_info(candidate_id, payload)
        return json_envelope(envelope, success_status=201)

    @app.route("/candidates/<candidate_id>/employee-info", methods=["GET"], endpoint="employee_info_view")
    def employee_info_view(candidate_id: str):
        ctx = SessionContext.from_session(session)
        return json_envelope(container.onboarding_service.get_submission(ctx, candidate_id))
