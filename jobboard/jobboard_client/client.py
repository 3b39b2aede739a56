"""HTTP client for the job board API.

``JobBoardClient`` keeps the signed-in user, their token and the last job
lists it fetched, and patches those lists after each mutating call so callers
can render from ``client.jobs`` and ``client.user_jobs`` without refetching.
"""

from __future__ import annotations

import logging
import mimetypes
import os
from typing import Any

import httpx

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class JobBoardAPIError(Exception):
    def __init__(self, status_code: int, message: str, field: str | None = None):
        self.status_code = status_code
        self.message = message
        self.field = field
        super().__init__(f"{status_code}: {message}")


class JobBoardClient:
    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        transport: httpx.BaseTransport | None = None,
        timeout: float = 10.0,
    ):
        self._http = httpx.Client(
            base_url=base_url.rstrip("/") + API_PREFIX,
            transport=transport,
            timeout=timeout,
        )
        self.token = token
        self.user: dict[str, Any] | None = None
        self.jobs: list[dict[str, Any]] = []
        self.user_jobs: list[dict[str, Any]] = []

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "JobBoardClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -----------------------------
    # Transport
    # -----------------------------
    def _request(self, method: str, path: str, **kwargs) -> dict[str, Any]:
        headers = kwargs.pop("headers", None) or {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        response = self._http.request(method, path, headers=headers, **kwargs)
        logger.debug("%s %s -> %s", method, path, response.status_code)

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.is_error:
            raise JobBoardAPIError(
                response.status_code,
                data.get("message") or response.reason_phrase,
                field=data.get("field"),
            )
        return data

    def _remember_session(self, data: dict[str, Any]) -> dict[str, Any]:
        self.user = data.get("user")
        self.token = data.get("token") or self.token
        return self.user

    def _replace_cached(self, job: dict[str, Any]) -> None:
        for cache in (self.jobs, self.user_jobs):
            for index, cached in enumerate(cache):
                if cached.get("id") == job.get("id"):
                    cache[index] = job

    # -----------------------------
    # Identity
    # -----------------------------
    def register(self, name: str, email: str, password: str, role: str | None = None, **profile) -> dict[str, Any]:
        payload = {"name": name, "email": email, "password": password, **profile}
        if role:
            payload["role"] = role
        return self._remember_session(self._request("POST", "/auth/register", json=payload))

    def login(self, email: str, password: str) -> dict[str, Any]:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        return self._remember_session(data)

    def logout(self) -> None:
        self.user = None
        self.token = None
        self.user_jobs = []

    def get_current_user(self) -> dict[str, Any]:
        self.user = self._request("GET", "/auth/me")["user"]
        return self.user

    def update_profile(self, **fields) -> dict[str, Any]:
        return self._remember_session(self._request("PATCH", "/auth/update", json=fields))

    # -----------------------------
    # Jobs
    # -----------------------------
    def get_jobs(self, job_type: str | None = None) -> list[dict[str, Any]]:
        params = {"jobType": job_type} if job_type else None
        self.jobs = self._request("GET", "/jobs", params=params)["jobs"]
        return self.jobs

    def search_jobs(self, tags=None, location: str | None = None, title: str | None = None) -> list[dict[str, Any]]:
        if tags is not None and not isinstance(tags, str):
            tags = ",".join(tags)
        params = {key: value for key, value in (("tags", tags), ("location", location), ("title", title)) if value}
        self.jobs = self._request("GET", "/jobs/search", params=params)["jobs"]
        return self.jobs

    def get_job(self, job_id: int) -> dict[str, Any]:
        return self._request("GET", f"/jobs/{job_id}")["job"]

    def create_job(self, **fields) -> dict[str, Any]:
        job = self._request("POST", "/jobs", json=fields)["job"]
        self.jobs.insert(0, job)
        self.user_jobs.insert(0, job)
        return job

    def update_job(self, job_id: int, **fields) -> dict[str, Any]:
        job = self._request("PUT", f"/jobs/{job_id}", json=fields)["job"]
        self._replace_cached(job)
        return job

    def delete_job(self, job_id: int) -> str:
        data = self._request("DELETE", f"/jobs/{job_id}")
        self.jobs = [job for job in self.jobs if job.get("id") != job_id]
        self.user_jobs = [job for job in self.user_jobs if job.get("id") != job_id]
        return data.get("message", "")

    def get_user_jobs(self) -> list[dict[str, Any]]:
        self.user_jobs = self._request("GET", "/jobs/user/myjobs")["jobs"]
        return self.user_jobs

    def like_job(self, job_id: int) -> tuple[dict[str, Any], bool]:
        data = self._request("PUT", f"/jobs/{job_id}/like")
        job = data["job"]
        self._replace_cached(job)
        return job, data["liked"]

    # -----------------------------
    # Applications
    # -----------------------------
    def apply_to_job(self, job_id: int, resume, phone_number: str, cover_letter: str | None = None) -> dict[str, Any]:
        """Submit an application.

        ``resume`` is a file path or an httpx file tuple
        ``(filename, content, content_type)``.
        """
        data = {"phoneNumber": phone_number}
        if cover_letter:
            data["coverLetter"] = cover_letter

        if isinstance(resume, (str, os.PathLike)):
            filename = os.path.basename(os.fspath(resume))
            content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
            with open(resume, "rb") as fh:
                response = self._request(
                    "PUT", f"/jobs/{job_id}/apply", data=data, files={"resume": (filename, fh, content_type)}
                )
        else:
            response = self._request("PUT", f"/jobs/{job_id}/apply", data=data, files={"resume": resume})
        return response["application"]

    def get_applicants(self, job_id: int) -> dict[str, Any]:
        data = self._request("GET", f"/jobs/{job_id}/applicants")
        data.pop("success", None)
        return data

    def update_application_status(self, job_id: int, application_id: int, status: str) -> dict[str, Any]:
        data = self._request(
            "PUT",
            f"/jobs/{job_id}/applicants",
            json={"applicationId": application_id, "status": status},
        )
        return data["application"]
