from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/google", methods=["POST"], endpoint="google_login")
    def google_login():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object with idToken")

        id_token = payload.get("idToken")
        if id_token is not None and not isinstance(id_token, str):
            raise ValidationError("idToken must be a string")

        result = container.auth_service.login_with_google(id_token)
        return jsonify(result.to_dict())
