"""
Flask REST API for the query repair service

Endpoints:
    GET /api/health-check                                - Health check
    GET /api/search/did-you-mean?q=...                   - Corrected candidates for a raw query
    GET /api/repos/<repo_id>/external-repository         - External repo spec of a repository
    GET /api/repos/<repo_id>/external-services           - External services (site admins only)
"""

from flask import Flask, request, jsonify
from flask_cors import CORS
import requests

from QueryRepair.Utility.env import load_env_file, get_max_query_length
from QueryRepair.Utility.auth import resolve_actor
from QueryRepair.Exception.ApiError import RepoNotFoundError, RepoUpdaterError, UnauthorizedError
from QueryRepair.Business.SearchBusiness import SearchBusiness
from QueryRepair.Business.ExternalServiceBusiness import ExternalServiceBusiness
from QueryRepair.Routes.validators import validate_did_you_mean_params, validate_connection_args, map_suggested_queries

import logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

"""Create and configure the Flask application.
    Args:
        search: Optional SearchBusiness, defaults to one using the built-in strategies
        external_services: Optional ExternalServiceBusiness, defaults to one talking to REPO_UPDATER_URL
    Returns:
        Flask application instance
"""
def CreateApp(search=None, external_services=None):

    app = Flask(__name__)
    # Load environment variables from .env
    load_env_file()
    CORS(app)
    RegisterRoutes(app, search or SearchBusiness(), external_services or ExternalServiceBusiness())
    return app

"""Register all API routes.
    Args:
        app: Flask application instance
"""
def RegisterRoutes(app: Flask, search: SearchBusiness, external_services: ExternalServiceBusiness) -> None:

    @app.route("/")
    def index():
        return "App is running!"

    @app.route('/api/health-check', methods=['GET'])
    def HealthCheck():
        return jsonify({
            "status": "healthy",
            "message": "Query repair API is running"
        }), 200

    """Propose corrected queries for a raw query.
        Query string:
            q: the raw query, may be empty
        Returns:
            JSON response with the ordered suggestions
    """
    @app.route('/api/search/did-you-mean', methods=['GET'])
    def DidYouMeanEndpoint():
        try:
            raw_query = validate_did_you_mean_params(request.args, get_max_query_length())
        except ValueError as e:
            return jsonify({"error": "invalid_parameter", "message": str(e)}), 400

        result = search.DidYouMean(raw_query)
        return jsonify({
            "success": True,
            "query": result["query"],
            "valid": result["valid"],
            "suggestions": map_suggested_queries(result["suggestions"]),
        }), 200

    @app.route('/api/repos/<int:repo_id>/external-repository', methods=['GET'])
    def ExternalRepositoryEndpoint(repo_id: int):
        try:
            spec = external_services.ExternalRepository(repo_id)
        except RepoUpdaterError as e:
            return UpstreamError(e)
        except requests.exceptions.RequestException as e:
            logger.error("repo-updater unreachable: %s", e)
            return jsonify({"error": "upstream_unavailable", "message": "repo-updater is unreachable"}), 502
        except Exception as e:
            logger.exception("Error reading external repository: %s", e)
            return jsonify({"error": "internal_error", "message": "Internal server error"}), 500
        return jsonify({"externalRepository": spec.to_dict() if spec else None}), 200

    """List the external services of a repository.
        Query string:
            first: optional page size
            offset: optional number of services to skip
        Requires a site admin token in the Authorization header.
    """
    @app.route('/api/repos/<int:repo_id>/external-services', methods=['GET'])
    def ExternalServicesEndpoint(repo_id: int):
        try:
            args = validate_connection_args(request.args)
        except ValueError as e:
            return jsonify({"error": "invalid_parameter", "message": str(e)}), 400

        try:
            actor = resolve_actor(request.headers)
            connection = external_services.ListExternalServices(actor, repo_id, args)
        except UnauthorizedError as e:
            logger.warning("Rejected external services request for repo %s: %s", repo_id, e.message)
            return jsonify({"error": "unauthorized", "message": e.message}), e.status_code
        except RepoUpdaterError as e:
            return UpstreamError(e)
        except requests.exceptions.RequestException as e:
            logger.error("repo-updater unreachable: %s", e)
            return jsonify({"error": "upstream_unavailable", "message": "repo-updater is unreachable"}), 502
        except Exception as e:
            logger.exception("Error listing external services: %s", e)
            return jsonify({"error": "internal_error", "message": "Internal server error"}), 500

        return jsonify(connection.to_dict()), 200

    def UpstreamError(e: RepoUpdaterError):
        logger.error("repo-updater error: %s", e.message)
        if isinstance(e, RepoNotFoundError):
            return jsonify({"error": "not_found", "message": e.message}), 404
        return jsonify({"error": "upstream_error", "message": e.message}), 502

    @app.errorhandler(404)
    def NotFound(error):
        return jsonify({
            "error": "not_found",
            "message": "Endpoint not found. Try GET /api/health-check or GET /api/search/did-you-mean"
        }), 404

    @app.errorhandler(405)
    def MethodNotAllowed(error):
        return jsonify({
            "error": "method_not_allowed",
            "message": "Method not allowed for this endpoint"
        }), 405
