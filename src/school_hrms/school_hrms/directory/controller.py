from __future__ import annotations

from flask import Flask, Response, jsonify, request, session

from ..common.responses import json_errors
from ..container import Container
from ..core.enums import Role
from ..users.session import SessionContext
from .export import CSV_MIMETYPE
from .model import DirectoryCriteria


def register(app: Flask, container: Container) -> None:
    def current_session() -> SessionContext:
        return SessionContext.from_session(session)

    @app.route("/directory", methods=["GET"], endpoint="directory")
    @json_errors
    def directory():
        current_session().require_role(Role.ADMIN, Role.FACULTY)
        criteria = DirectoryCriteria.from_params(request.args)
        result = container.directory_service.search(
            criteria,
            page=request.args.get("page", 1),
            limit=request.args.get("limit"),
        )
        return jsonify(result.to_dict())

    @app.route("/directory", methods=["PUT"], endpoint="directory_action")
    @json_errors
    def directory_action():
        payload = request.get_json(silent=True) or {}
        message = container.directory_service.apply_action(
            current_session(),
            employee_id=payload.get("employeeId"),
            action=payload.get("action"),
            new_status=payload.get("newStatus"),
        )
        return jsonify({"success": True, "message": message})

    @app.route("/directory/export.csv", methods=["GET"], endpoint="directory_export")
    @json_errors
    def directory_export():
        current_session().require_role(Role.ADMIN, Role.FACULTY)
        criteria = DirectoryCriteria.from_params(request.args)
        filename, text = container.directory_service.export(criteria)
        return Response(
            text.encode("utf-8-sig"),
            mimetype=CSV_MIMETYPE,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
