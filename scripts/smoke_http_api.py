"""
Manual smoke runner for the MEL Django adapter.

Usage:
    python scripts/smoke_http_api.py
    python scripts/smoke_http_api.py --base-url http://127.0.0.1:8000 --user alice
"""

from __future__ import annotations

import argparse
import base64
import json
from urllib import error, request


def _auth_header(username: str, password: str) -> dict[str, str]:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


def _decode(raw: bytes):
    if not raw:
        return None
    try:
        return json.loads(raw.decode("utf-8"))
    except ValueError:
        return raw.decode("utf-8", errors="replace")


def _call(
    *,
    method: str,
    url: str,
    headers: dict[str, str],
    body: dict | list | None = None,
) -> tuple[int, dict[str, str], object]:
    encoded = None
    req_headers = dict(headers)
    if body is not None:
        encoded = json.dumps(body).encode("utf-8")
        req_headers["Content-Type"] = "application/json"

    req = request.Request(url=url, method=method, headers=req_headers, data=encoded)
    try:
        with request.urlopen(req) as response:
            return response.status, dict(response.headers), _decode(response.read())
    except error.HTTPError as exc:
        return exc.code, dict(exc.headers), _decode(exc.read())


def _print_case(label: str, status: int, payload: object, location: str | None = None) -> None:
    suffix = f" location={location}" if location else ""
    print(f"\n[{label}] status={status}{suffix}")
    print(json.dumps(payload, indent=2, sort_keys=True))


def run(base_url: str, username: str, password: str) -> None:
    api = base_url.rstrip("/")
    auth = _auth_header(username, password)

    status, _, payload = _call(method="GET", url=f"{api}/projects", headers={})
    _print_case("missing-credentials", status, payload)

    status, headers, payload = _call(method="POST", url=f"{api}/login", headers=auth)
    _print_case("provision-login", status, payload, headers.get("Location"))

    status, _, payload = _call(method="GET", url=f"{api}/login", headers=auth)
    _print_case("read-login", status, payload)

    status, _, payload = _call(
        method="GET",
        url=f"{api}/login",
        headers=_auth_header(username, password + "-wrong"),
    )
    _print_case("wrong-password", status, payload)

    status, _, payload = _call(method="GET", url=f"{api}/projects", headers=auth)
    _print_case("list-projects", status, payload)

    status, headers, payload = _call(
        method="POST",
        url=f"{api}/projects",
        headers=auth,
        body={"Name": "Smoke project", "Percentage": 0, "Description": "Created by smoke run"},
    )
    _print_case("create-project", status, payload, headers.get("Location"))
    location = headers.get("Location")
    if status != 201 or not location:
        return

    status, _, payload = _call(method="GET", url=f"{api}{location}", headers=auth)
    _print_case("read-project", status, payload)

    status, _, payload = _call(method="GET", url=f"{api}{location}/flag", headers=auth)
    _print_case("read-flag", status, payload)

    version = payload.get("Version", 0) if isinstance(payload, dict) else 0
    status, _, payload = _call(
        method="PUT",
        url=f"{api}{location}/flag",
        headers=auth,
        body={"Version": version, "Value": True},
    )
    _print_case("set-flag", status, payload)

    status, _, payload = _call(method="DELETE", url=f"{api}{location}", headers=auth)
    _print_case("delete-project", status, payload)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--base-url",
        default="http://127.0.0.1:8000",
        help="Server base URL.",
    )
    parser.add_argument("--user", default="smoke-user", help="Account to use.")
    parser.add_argument("--password", default="smoke-password", help="Account password.")
    args = parser.parse_args()
    run(args.base_url, args.user, args.password)


if __name__ == "__main__":
    main()
