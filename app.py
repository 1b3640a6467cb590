#!/usr/bin/env python3
"""
Flask REST API for Entity Resolver Service.

Uses environment variables for configuration (see .env.example).
"""
import logging
import os

from dotenv import load_dotenv

from entity_resolver.api import create_app
from entity_resolver.app import EntityResolverApp
from entity_resolver.config_loader import load_config_from_env

# Load environment variables
load_dotenv()

config = load_config_from_env()

# Setup logging
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

resolver_app = EntityResolverApp(config)
resolver_app.initialize()
logger.info(f"Resolver ready with {len(resolver_app.service.snapshot)} entities")

app = create_app(resolver_app.service)


if __name__ == "__main__":
    port = int(os.getenv("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=False)
