import logging
import os

from flask import Flask

from .api import create_api_blueprint
from .cleaner import Cleaner
from .hooks import CleanerHooks
from .repository import InstalledRepository
from .rules import RuleTable, RulesFileError, load_rules_file
from .scheduler import CleanupScheduler


def build_rule_table(rules_file: str | None) -> RuleTable:
    table = RuleTable.default()
    if not rules_file:
        return table
    try:
        return table.merged(load_rules_file(rules_file))
    except RulesFileError:
        logging.getLogger("vendor_cleanup").warning(
            "[CleanupPlugin]: Ignoring rules file %s, using built-in rules",
            rules_file,
            exc_info=True,
        )
        return table


def create_app() -> Flask:
    app = Flask(__name__)

    log_level = str(os.getenv("VC_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))

    vendor_dir = str(os.getenv("VC_VENDOR_DIR", "vendor"))
    rules_file = os.getenv("VC_RULES_FILE")
    sweep_interval_seconds = int(str(os.getenv("VC_SWEEP_INTERVAL_SECONDS", "0")))

    rule_table = build_rule_table(rules_file)
    cleaner = Cleaner(rule_table=rule_table, base_install_dir=vendor_dir)
    repository = InstalledRepository(vendor_dir)
    hooks = CleanerHooks(cleaner, repository)

    scheduler = None
    if sweep_interval_seconds > 0:
        scheduler = CleanupScheduler(
            cleaner=cleaner,
            repository=repository,
            sweep_interval_seconds=sweep_interval_seconds,
        )
        scheduler.start()

    app.register_blueprint(
        create_api_blueprint(hooks=hooks, rule_table=rule_table, scheduler=scheduler),
        url_prefix="/api",
    )
    app.extensions["vendor_cleanup_hooks"] = hooks
    app.extensions["vendor_cleanup_scheduler"] = scheduler

    return app


def main() -> None:
    app = create_app()
    api_host = str(os.getenv("VC_API_HOST", "0.0.0.0"))
    api_port = int(str(os.getenv("VC_API_PORT", "9200")))
    app.run(host=api_host, port=api_port)


if __name__ == "__main__":
    main()
