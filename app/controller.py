from flask import Flask, request
import json

from .constants import DEBUG_MODE, SERVICE_NAME, USE_CARDS, PROCESS_ALL_ACTIONS
from .adapters import normalize_payload
from .detection import should_process_action
from .formatters import build_message
from .models import TranslatorConfig
from .services import DeliveryError, send_gchat_message


def load_config():
    return TranslatorConfig(use_rich_cards=USE_CARDS, process_all_actions=PROCESS_ALL_ACTIONS)


def create_app(config=None, webhook_url=None):
    app = Flask(__name__)
    translator_config = config or load_config()

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': SERVICE_NAME}, 200

    @app.route('/', methods=['GET'])
    def index():
        return 'Sentry to Google Chat Webhook - Funcionando!', 200

    @app.route('/sentry-webhook', methods=['POST'])
    @app.route('/webhook', methods=['POST'])
    def sentry_webhook():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            print("[ERROR] Erro ao decodificar payload: corpo ausente ou não é um objeto JSON")
            return {'error': 'erro ao decodificar payload'}, 400

        if DEBUG_MODE:
            print(f"[DEBUG] Received data: {json.dumps(data)[:1000]}")

        event = normalize_payload(data)
        print(f"[INFO] Webhook recebido - Projeto: {event.project}, Nível: {event.level}, Título: {event.title}")

        if not should_process_action(event.action, translator_config):
            if DEBUG_MODE:
                print(f"[DEBUG] Ignorando action '{event.action}' (apenas 'created' é processada)")
            return {'status': 'ignored', 'action': event.action}, 200

        message = build_message(event, translator_config)
        if DEBUG_MODE:
            print(f"[DEBUG] Payload: {json.dumps(message.to_dict(), ensure_ascii=False)[:500]}...")

        try:
            send_gchat_message(message, webhook_url=webhook_url)
        except DeliveryError as exc:
            print(f"[ERROR] Erro ao enviar para GChat: {exc}")
            return {'error': 'erro ao enviar para o GChat'}, 500

        print("[INFO] Mensagem enviada com sucesso para o Google Chat")
        return {'status': 'sent'}, 200

    return app
