import logging
import os

import httpx
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


GITHUB_API_URL = "https://api.github.com"
REPO_LIMIT = 5


class GithubProfileNotFound(Exception):
	pass


def _build_client() -> httpx.Client:
	return httpx.Client(follow_redirects=True)


def _request_headers() -> dict[str, str]:
	load_dotenv()
	headers = {
		"User-Agent": "devconnector-api",
		"Accept": "application/vnd.github+json",
	}
	token = os.getenv("GITHUB_TOKEN")
	if token:
		headers["Authorization"] = f"Bearer {token}"
	return headers


def fetch_latest_repos(username: str) -> list | dict:
	"""Return GitHub's JSON listing of the user's most recently created repos.

	Raises GithubProfileNotFound on any non-200 status; transport errors
	propagate as httpx.HTTPError.
	"""
	load_dotenv()
	base_url = os.getenv("GITHUB_API_URL", GITHUB_API_URL).rstrip("/")
	url = f"{base_url}/users/{username}/repos"
	params = {"per_page": REPO_LIMIT, "sort": "created", "direction": "desc"}

	logger.info("GitHub request url=%s", url)
	with _build_client() as client:
		resp = client.get(url, params=params, headers=_request_headers())

	logger.info("GitHub HTTP %s returned status=%d", url, resp.status_code)
	if resp.status_code != 200:
		logger.warning("GitHub lookup failed for username=%s: %s", username, resp.text[:500])
		raise GithubProfileNotFound(username)

	return resp.json()
