import structlog
from flask import Flask, request, jsonify

from proofs.config import Settings, load_settings
from proofs.dispatch import classify, verify_bundle
from proofs.log import configure_logging

log = structlog.get_logger(__name__)

def create_app(settings: Settings = None) -> Flask:
    settings = settings or load_settings()
    app = Flask(__name__)

    @app.post("/verify")
    def verify():
        """
        Request JSON: one bundle, Cardano or Solana shaped.
        Response: {"ok": bool, "reason": str|null}
        """
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        result = verify_bundle(data, settings)
        log.info("verify", scheme=classify(data), ok=result.ok, reason=result.reason)
        return jsonify(result.to_dict()), 200

    @app.post("/verify/batch")
    def verify_batch():
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, list):
            return jsonify({"error": "Request body must be a JSON array of bundles"}), 400

        results = [verify_bundle(bundle, settings).to_dict() for bundle in data]
        log.info("verify_batch", count=len(results), accepted=sum(r["ok"] for r in results))
        return jsonify({"results": results}), 200

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    return app

if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level, settings.log_json)
    create_app(settings).run(host=settings.host, port=settings.port)
