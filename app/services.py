import requests
from .constants import GCHAT_WEBHOOK, GCHAT_TIMEOUT_SECONDS, DEBUG_MODE


class DeliveryError(Exception):
    pass


def send_gchat_message(message, webhook_url=None, timeout=None):
    url = webhook_url or GCHAT_WEBHOOK
    if not url:
        raise DeliveryError("webhook do GChat não definido")

    payload = message.to_dict()
    try:
        resp = requests.post(url, json=payload, timeout=timeout or GCHAT_TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        raise DeliveryError(f"erro ao enviar para o GChat: {exc}") from exc

    if DEBUG_MODE:
        print(f"[DEBUG] GChat response: {resp.status_code}")
        if resp.status_code != 200:
            print(f"[DEBUG] Response content: {resp.text}")

    if resp.status_code != 200:
        raise DeliveryError(f"GChat retornou status {resp.status_code}")
    return resp
