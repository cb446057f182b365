import os

# Configurações globais de ambiente
GCHAT_WEBHOOK = os.getenv("GCHAT_WEBHOOK")
APP_PORT = int(os.getenv("PORT", os.getenv("APP_PORT", "10000")))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Formato da mensagem: cards do Google Chat ou texto simples
USE_CARDS = os.getenv("USE_CARDS", "false").lower() == "true"
# Se false, apenas issues com action == "created" são encaminhadas
PROCESS_ALL_ACTIONS = os.getenv("PROCESS_ALL_ACTIONS", "false").lower() == "true"
GCHAT_TIMEOUT_SECONDS = int(os.getenv("GCHAT_TIMEOUT_SECONDS", "10"))

SERVICE_NAME = "sentry-gchat-proxy"
SENTRY_BUTTON_TEXT = "Ver no Sentry"
NOT_AVAILABLE = "N/A"
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"

KNOWN_LEVELS = {"fatal", "error", "warning", "info", "debug"}
KNOWN_PRIORITIES = {"high", "medium", "low"}

LEVEL_EMOJIS = {
    "fatal": "🚨",
    "error": "🚨",
    "warning": "⚠️",
    "info": "ℹ️",
    "debug": "🐛",
    "default": "📋",
}

PRIORITY_EMOJIS = {
    "high": "🔴",
    "medium": "🟡",
    "low": "🟢",
    "default": "⚪",
}

# Linhas do card, na ordem em que aparecem
CARD_ROWS = {
    "short_id": {"label": "ID", "icon": "TICKET"},
    "project": {"label": "Projeto", "icon": "BOOKMARK"},
    "level": {"label": "Nível", "icon": "ERROR"},
    "priority": {"label": "Prioridade", "icon": "STAR"},
    "platform": {"label": "Plataforma", "icon": "DESCRIPTION"},
    "culprit": {"label": "Origem", "icon": "DESCRIPTION"},
    "count": {"label": "Ocorrências", "icon": "MULTIPLE_PEOPLE"},
    "status": {"label": "Status", "icon": "BOOKMARK"},
    "timestamp": {"label": "Timestamp", "icon": "CLOCK"},
}
