from dotenv import load_dotenv

# .env precisa ser carregado antes de app.constants ler o ambiente
if not load_dotenv():
    print("[INFO] Nenhum arquivo .env encontrado. Usando variáveis do ambiente.")

from app.controller import create_app  # noqa: E402
from app.constants import APP_PORT, DEBUG_MODE, GCHAT_WEBHOOK, USE_CARDS, PROCESS_ALL_ACTIONS  # noqa: E402


app = create_app()


def print_startup_banner():
    if not GCHAT_WEBHOOK:
        print("⚠️  AVISO: GCHAT_WEBHOOK não está definido")
    print(f"🚀 Servidor iniciado na porta {APP_PORT}")
    print("📋 Endpoints disponíveis:")
    print("   POST /sentry-webhook - Recebe webhooks do Sentry")
    print("   GET  /health         - Health check")
    print("   GET  /               - Status do serviço")
    if USE_CARDS:
        print("🎨 Formato: Cards do Google Chat")
    else:
        print("💬 Formato: Mensagem de texto simples")
    if PROCESS_ALL_ACTIONS:
        print("🔁 Actions: todas")
    else:
        print("🆕 Actions: apenas 'created'")


if __name__ == '__main__':
    print_startup_banner()
    app.run(host='0.0.0.0', port=APP_PORT, debug=DEBUG_MODE)
