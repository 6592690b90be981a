"""Project-wide constants."""

from typing import Literal

SERVER_NAME = "coolify"
SERVER_VERSION = "0.1.18"

API_PREFIX = "/api/v1"
DEFAULT_TIMEOUT = 30.0
DEFAULT_TRANSPORT = "stdio"

TRANSPORTS = ("stdio", "sse", "streamable-http")

SERVICE_TYPES = (
    "activepieces",
    "appsmith",
    "appwrite",
    "authentik",
    "babybuddy",
    "budge",
    "changedetection",
    "chatwoot",
    "classicpress-with-mariadb",
    "classicpress-with-mysql",
    "classicpress-without-database",
    "cloudflared",
    "code-server",
    "dashboard",
    "directus",
    "directus-with-postgresql",
    "docker-registry",
    "docuseal",
    "docuseal-with-postgres",
    "dokuwiki",
    "duplicati",
    "emby",
    "embystat",
    "fider",
    "filebrowser",
    "firefly",
    "formbricks",
    "ghost",
    "gitea",
    "gitea-with-mariadb",
    "gitea-with-mysql",
    "gitea-with-postgresql",
    "glance",
    "glances",
    "glitchtip",
    "grafana",
    "grafana-with-postgresql",
    "grocy",
    "heimdall",
    "homepage",
    "jellyfin",
    "kuzzle",
    "listmonk",
    "logto",
    "mediawiki",
    "meilisearch",
    "metabase",
    "metube",
    "minio",
    "moodle",
    "n8n",
    "n8n-with-postgresql",
    "next-image-transformation",
    "nextcloud",
    "nocodb",
    "odoo",
    "openblocks",
    "pairdrop",
    "penpot",
    "phpmyadmin",
    "pocketbase",
    "posthog",
    "reactive-resume",
    "rocketchat",
    "shlink",
    "slash",
    "snapdrop",
    "statusnook",
    "stirling-pdf",
    "supabase",
    "syncthing",
    "tolgee",
    "trigger",
    "trigger-with-external-database",
    "twenty",
    "umami",
    "unleash-with-postgresql",
    "unleash-without-database",
    "uptime-kuma",
    "vaultwarden",
    "vikunja",
    "weblate",
    "whoogle",
    "wordpress-with-mariadb",
    "wordpress-with-mysql",
    "wordpress-without-database",
)

ServiceType = Literal[SERVICE_TYPES]  # type: ignore[valid-type]

CONNECTION_FAILED_MESSAGE = (
    "Failed to connect to Coolify server at {base_url}. "
    "Please check if the server is running and the URL is correct."
)
