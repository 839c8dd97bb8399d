"""
Thin JSON-over-HTTPS client for the payment callback service.

A session carries the transport settings (client certificate for mutual TLS,
server verification); every call is a single POST with no retry.
"""
import json
import logging

import requests
import urllib3
import urllib3.exceptions

from text_compare.errors import TransportError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


def build_session(cert_file=None, key_file=None, verify=True) -> requests.Session:
    """
    Session for the callback service.
    cert_file/key_file are PEM files; key_file may be omitted when the key is
    bundled in cert_file. verify may also be a CA bundle path.
    """
    session = requests.Session()
    session.headers.update(JSON_HEADERS)
    if cert_file:
        session.cert = (cert_file, key_file) if key_file else cert_file
    session.verify = verify
    if verify is False:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    return session


def post_json(session, base_url, path, payload, headers=None, timeout=30):
    """POST payload as JSON to base_url + path. Returns (status_code, body_text)."""
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    body = json.dumps(payload)
    logger.debug(f"Request | {url} | {body}")
    try:
        resp = session.post(url, data=body, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        logger.error(f"Request failed | {url} | {e}")
        raise TransportError(f"POST {url} failed: {e}") from e

    logger.info(f"API Status Code | {path} | {resp.status_code}")
    # keep logged body short
    logger.debug(f"Response body | {resp.text[:1000]}")
    return resp.status_code, resp.text


# ---- callback service calls ----

def get_txn_status(session, base_url, transaction_id, transaction_type, timeout=30):
    payload = {"transaction_id": transaction_id, "transaction_type": transaction_type}
    return post_json(session, base_url, "/txn-status", payload, timeout=timeout)


def update_txn(session, base_url, transaction_id, transaction_type, transaction_status, timeout=30):
    payload = {
        "transaction_id": transaction_id,
        "transaction_type": transaction_type,
        "transaction_status": transaction_status,
    }
    return post_json(session, base_url, "/update-txn", payload, timeout=timeout)
