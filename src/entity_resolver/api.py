"""
Flask REST API for Entity Resolver Service.

Endpoints:
- GET  /health      service status and catalog version
- POST /resolve     resolve one query with optional user context
- POST /my-teams    resolve every saved team
- POST /overlay     merge an overlay document into the catalog
- GET  /categories  known leagues / holiday types
"""
import logging

from flask import Flask, jsonify, request

from .schemas import unresolved_dict
from .security import InputValidator, ValidationError
from .service import ResolverService

logger = logging.getLogger(__name__)


def create_app(service: ResolverService) -> Flask:
    """
    Build the Flask application around an initialized ResolverService.

    :param service: Service that owns the catalog snapshot
    :return: Flask app
    """
    app = Flask(__name__)

    @app.route("/health", methods=["GET"])
    def health():
        snapshot = service.snapshot
        return jsonify({
            "status": "ok",
            "entities": len(snapshot),
            "catalog_version": snapshot.version,
        })

    @app.route("/resolve", methods=["POST"])
    def resolve():
        """Resolve endpoint."""
        try:
            params = InputValidator.validate_resolve_request(request.get_json(silent=True))
        except ValidationError as e:
            logger.warning(f"Input validation failed: {str(e)}")
            return jsonify({"error": str(e)}), 400

        try:
            result = service.resolve(**params)
        except Exception as e:
            logger.error(f"Resolve endpoint error: {str(e)}", exc_info=True)
            return jsonify({"error": str(e)}), 500

        if result is None:
            logger.info(f"Unresolved query: '{params['query']}'")
            return jsonify(unresolved_dict())

        logger.info(
            f"Resolved '{params['query']}' -> {result.entity.id} "
            f"({result.match_type.value}, {result.confidence})"
        )
        return jsonify(result.to_dict(include_provenance=True))

    @app.route("/my-teams", methods=["POST"])
    def my_teams():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        try:
            user_teams = InputValidator.validate_user_teams(payload.get("user_teams"))
        except ValidationError as e:
            logger.warning(f"Input validation failed: {str(e)}")
            return jsonify({"error": str(e)}), 400

        results = service.resolve_my_teams(user_teams)
        return jsonify({"teams": [r.to_dict(include_provenance=True) for r in results]})

    @app.route("/overlay", methods=["POST"])
    def overlay():
        """Apply an overlay document. ``?force=true`` skips the version check."""
        document = request.get_json(silent=True)
        if not isinstance(document, dict):
            return jsonify({"error": "Overlay must be a JSON object"}), 400

        force = request.args.get("force", "false").lower() == "true"
        try:
            report = service.apply_overlay(document, force=force)
        except Exception as e:
            logger.error(f"Overlay endpoint error: {str(e)}", exc_info=True)
            return jsonify({"error": str(e)}), 500

        return jsonify(report.to_dict())

    @app.route("/categories", methods=["GET"])
    def categories():
        return jsonify({"categories": service.snapshot.categories})

    return app
