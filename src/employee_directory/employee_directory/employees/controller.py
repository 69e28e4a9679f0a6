from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="find_employee")
    def find_employee():
        if "email" not in request.args:
            raise ValidationError("Missing required query parameter: email")

        employee = container.directory_service.find_employee_by_email(request.args.get("email"))
        return jsonify(employee.to_dict() if employee else None)

    @app.route("/api/employees/<int(signed=True):employee_id>/salary", methods=["GET"], endpoint="salary_history")
    def salary_history(employee_id: int):
        history = container.directory_service.get_salary_history(employee_id)
        return jsonify([entry.to_dict() for entry in history])
