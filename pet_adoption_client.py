"""Pet adoption API client.

This module wraps the REST API served by ``pet_adoption_api`` in a
small client with one method per remote operation: ``add_user``,
``get_pets_not_adopted``, ``file_for_adoption`` and so on.  Payloads and
results are plain dictionaries using the API's camelCase field names.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``.  On failure ``data`` is ``None`` (or an empty list for list
operations) and ``error`` is a dictionary with the keys:

* ``kind`` – the API error variant (``NotFound``, ``EmptyField``,
  ``InvalidPayload``), ``HTTPError`` for other HTTP failures, or
  ``None`` when the server could not be reached;
* ``message`` – a human readable description;
* ``status_code`` – the HTTP status, or ``None``.

The client supports optional authentication via a bearer token (see
``create_token.py``) which determines the caller principal used by the
``owner`` lookups.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]
Result = Tuple[Optional[Any], Optional[Error]]

_ERROR_KINDS = ("NotFound", "EmptyField", "InvalidPayload")


class PetAdoptionAPI:
    """Client for interacting with the pet adoption API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including the version prefix,
                e.g. ``http://localhost:8000/api/v1``.
            api_key: Optional bearer token.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/pets/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            error = self._error_from_response(exc.response)
            logger.error("API request failed (%s): %s", error["status_code"], error["message"])
            return None, error
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"kind": None, "message": str(exc), "status_code": None}

    @staticmethod
    def _error_from_response(response: Optional[requests.Response]) -> Error:
        """Translate an error response into the client's error dictionary."""
        if response is None:
            return {"kind": "HTTPError", "message": "No response", "status_code": None}
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for kind in _ERROR_KINDS:
                if kind in body:
                    return {"kind": kind, "message": str(body[kind]), "status_code": response.status_code}
            if "detail" in body:
                return {"kind": "HTTPError", "message": str(body["detail"]), "status_code": response.status_code}
        return {
            "kind": "HTTPError",
            "message": response.text or response.reason or "",
            "status_code": response.status_code,
        }

    def _list(self, path: str, *, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def add_user(self, payload: Dict[str, Any]) -> Result:
        """Register a user (``name``, ``phoneNumber``, ``email``, ``address``)."""
        return self._request("POST", "/users/", json_body=payload)

    def get_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/users/")

    def get_user(self, user_id: str) -> Result:
        """Return the user, or ``(None, None)`` if the id is unknown."""
        return self._request("GET", f"/users/{user_id}")

    def get_user_owner(self) -> Result:
        return self._request("GET", "/users/owner")

    def delete_user(self, user_id: str) -> Result:
        return self._request("DELETE", f"/users/{user_id}")

    # ------------------------------------------------------------------
    # Pets
    # ------------------------------------------------------------------
    def add_pet(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/pets/", json_body=payload)

    def add_pet_image(self, pet_id: str, pet_image: str) -> Result:
        """Store an image for a pet.  The server replaces the whole pet row."""
        return self._request("POST", "/pets/image", json_body={"petId": pet_id, "petImage": pet_image})

    def get_pet(self, pet_id: str) -> Result:
        return self._request("GET", f"/pets/{pet_id}")

    def get_pets(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/pets/")

    def get_pets_not_adopted(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/pets/not-adopted")

    def update_pet_info(self, pet_id: str, health_status: str, age: str) -> Result:
        return self._request(
            "PUT", f"/pets/{pet_id}", json_body={"healthStatus": health_status, "age": age}
        )

    def search_pets_by_species(self, species: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/pets/search", params={"species": species})

    def delete_pet(self, pet_id: str) -> Result:
        return self._request("DELETE", f"/pets/{pet_id}")

    # ------------------------------------------------------------------
    # Shelters
    # ------------------------------------------------------------------
    def create_shelter(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/shelters/", json_body=payload)

    def get_shelter(self, shelter_id: str) -> Result:
        return self._request("GET", f"/shelters/{shelter_id}")

    def get_shelters(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/shelters/")

    def get_shelter_owner(self) -> Result:
        return self._request("GET", "/shelters/owner")

    def update_shelter_info(self, shelter_id: str, phone_number: str, email: str) -> Result:
        return self._request(
            "PUT", f"/shelters/{shelter_id}", json_body={"phoneNumber": phone_number, "email": email}
        )

    def delete_shelter(self, shelter_id: str) -> Result:
        return self._request("DELETE", f"/shelters/{shelter_id}")

    # ------------------------------------------------------------------
    # Adoptions
    # ------------------------------------------------------------------
    def file_for_adoption(self, payload: Dict[str, Any]) -> Result:
        """File an application (``userId``, ``petId``, ``reasonForAdoption``)."""
        return self._request("POST", "/adoptions/", json_body=payload)

    def get_adoption_records(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/adoptions/")

    def get_adoption_record(self, adoption_id: str) -> Result:
        return self._request("GET", f"/adoptions/{adoption_id}")

    def update_adoption_record(self, adoption_id: str, payload: Dict[str, Any]) -> Result:
        """Replace ``userName``, ``userPhoneNumber``, ``address`` and ``reasonForAdoption``."""
        return self._request("PUT", f"/adoptions/{adoption_id}", json_body=payload)

    def complete_adoption(self, adoption_id: str) -> Result:
        return self._request("POST", f"/adoptions/{adoption_id}/complete")

    def fail_adoption(self, adoption_id: str) -> Result:
        return self._request("POST", f"/adoptions/{adoption_id}/fail")
