from urllib.parse import urlparse
import socket
from backend import config
import backend.infra.supabase_client as supabase_client

def _check_table(client, name: str):
    try:
        res = client.table(name).select("id").limit(1).execute()
        cnt = len(res.data or [])
        return {"ok": True, "rows": cnt}
    except Exception as e:
        return {"ok": False, "error": str(e)}

def health_supabase_info():
    effective_url = config.SUPABASE_URL
    parsed = urlparse(effective_url) if effective_url else None
    hostname = parsed.hostname if parsed else None
    dns_ok = None
    dns_error = None
    if hostname:
        try:
            socket.getaddrinfo(hostname, 443)
            dns_ok = True
        except OSError as e:
            dns_ok = False
            dns_error = str(e)

    info = {
        "supabase_url": effective_url,
        "hostname": hostname,
        "dns_ok": dns_ok,
        "dns_error": dns_error,
        "connect_ok": False,
        "error": None,
        "tables": {}
    }
    try:
        client = supabase_client.get_supabase()
        info["tables"][config.INVOICES_TABLE] = _check_table(client, config.INVOICES_TABLE)
        info["connect_ok"] = info["tables"][config.INVOICES_TABLE]["ok"]
    except Exception as e:
        info["error"] = str(e)
    return info
