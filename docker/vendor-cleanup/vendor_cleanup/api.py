from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request

from .hooks import CleanupHooks
from .models import PackageDescriptor
from .repository import RepositoryError
from .rules import RuleTable
from .scheduler import CleanupScheduler


LOGGER = logging.getLogger("vendor_cleanup")


def _parse_package_payload(payload: dict) -> PackageDescriptor:
    if not isinstance(payload, dict):
        raise ValueError("package must be an object")
    return PackageDescriptor.from_dict(payload)


def _parse_packages_payload(payload: dict) -> list[PackageDescriptor] | None:
    if not isinstance(payload, dict):
        raise ValueError("body must be an object")
    packages = payload.get("packages")
    if packages is None:
        return None
    if not isinstance(packages, list):
        raise ValueError("packages must be a list")
    return [_parse_package_payload(item) for item in packages]


def create_api_blueprint(
    *,
    hooks: CleanupHooks,
    rule_table: RuleTable,
    scheduler: CleanupScheduler | None = None,
) -> Blueprint:
    blueprint = Blueprint("vendor_cleanup_api", __name__)

    def _single_package_event(handler) -> tuple:
        payload = request.get_json(silent=True) or {}
        try:
            package = _parse_package_payload(payload)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400

        outcome = handler(package)
        return jsonify({"status": "ok", "outcome": outcome.to_dict()}), 200

    @blueprint.post("/events/package-installed")
    def package_installed() -> tuple:
        return _single_package_event(hooks.on_package_installed)

    @blueprint.post("/events/package-updated")
    def package_updated() -> tuple:
        return _single_package_event(hooks.on_package_updated)

    @blueprint.post("/events/workflow-completed")
    def workflow_completed() -> tuple:
        payload = request.get_json(silent=True) or {}
        try:
            packages = _parse_packages_payload(payload)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400

        try:
            outcomes = hooks.on_workflow_completed(packages)
        except RepositoryError as exc:
            LOGGER.warning("[CleanupPlugin]: Installed packages could not be listed", exc_info=True)
            return jsonify({"error": str(exc)}), 500

        return jsonify({"status": "ok", "outcomes": [item.to_dict() for item in outcomes]}), 200

    @blueprint.get("/rules/<path:package_name>")
    def package_rules(package_name: str) -> tuple:
        rules = rule_table.rules_for(package_name)
        if rules is None:
            return jsonify({"error": "no rules for package"}), 404
        return jsonify({"package": package_name, "rules": list(rules)}), 200

    @blueprint.get("/health")
    def health() -> tuple:
        return (
            jsonify(
                {
                    "status": "ok",
                    "scheduler_running": bool(scheduler is not None and scheduler.is_running),
                    "rules": len(rule_table),
                }
            ),
            200,
        )

    return blueprint
