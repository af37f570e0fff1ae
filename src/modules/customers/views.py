"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.  Service
results are translated into HTTP responses by
``modules.core.errors.error_response``; anything unexpected reaches the
DRF exception handler and becomes a generic 500.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from django.conf import settings
from django.utils.cache import patch_cache_control
from drf_spectacular.utils import OpenApiParameter, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.errors import error_envelope, error_response
from modules.customers.area_codes import SettingsAreaCodeLookup
from modules.customers.dtos import CustomerDTO, field_errors
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService
from shared.domain.result import ErrorKind, ServiceError

ID_MISMATCH_MESSAGE = (
    "The Customer ID in the request body must match that of the Customer being updated"
)


def _bad_request(detail: str) -> Response:
    return Response(
        error_envelope("bad_request", detail, status.HTTP_400_BAD_REQUEST),
        status=status.HTTP_400_BAD_REQUEST,
    )


def _with_cache_hint(response: Response) -> Response:
    patch_cache_control(
        response, no_transform=True, max_age=settings.CUSTOMER_CACHE_MAX_AGE
    )
    return response


class CustomerViewSet(ViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    lookup_value_regex = "[0-9]+"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(
            repository=CustomerDjangoRepository(),
            area_codes=SettingsAreaCodeLookup.from_settings(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Fetch all Customers",
        parameters=[
            OpenApiParameter("email", str, description="Return only this Customer"),
            OpenApiParameter("name", str, description="Exact name match"),
        ],
        responses={200: CustomerSerializer(many=True)},
    )
    def list(self, request: Request) -> Response:
        """GET /customers"""
        email = request.query_params.get("email")
        name = request.query_params.get("name")

        if email is not None:
            result = self._service.find_by_email(email)
            if not result.ok:
                return error_response(result.error)
            customers = [result.value]
        elif name is not None:
            customers = self._service.find_all_by_name(name).value
        else:
            customers = self._service.find_all_ordered_by_name().value

        return Response(CustomerSerializer(customers, many=True).data)

    @extend_schema(summary="Fetch a Customer by id", responses={200: CustomerSerializer})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /customers/{pk}"""
        result = self._service.find_by_id(int(pk))
        if not result.ok:
            return error_response(result.error)
        return _with_cache_hint(Response(CustomerSerializer(result.value).data))

    @extend_schema(summary="Fetch a Customer by email", responses={200: CustomerSerializer})
    @action(
        detail=False,
        methods=["get"],
        url_path=r"email/(?P<email>[^/]+@[^/]+)",
        url_name="by-email",
    )
    def by_email(self, request: Request, email: str | None = None) -> Response:
        """GET /customers/email/{email}"""
        result = self._service.find_by_email(email)
        if not result.ok:
            return error_response(result.error)
        return _with_cache_hint(Response(CustomerSerializer(result.value).data))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Add a new Customer",
        request=CustomerSerializer,
        responses={201: CustomerSerializer},
    )
    def create(self, request: Request) -> Response:
        """POST /customers

        An unknown phone area code is a 400 keyed by ``area_code``, as on PUT.
        """
        data = request.data
        if not isinstance(data, Mapping):
            return _bad_request("Bad Request")

        try:
            dto = CustomerDTO.model_validate(dict(data))
        except PydanticValidationError as exc:
            return error_response(_validation_error(exc))

        result = self._service.create(dto)
        if not result.ok:
            return error_response(result.error)
        return Response(
            CustomerSerializer(result.value).data, status=status.HTTP_201_CREATED
        )

    @extend_schema(
        summary="Update a Customer",
        request=CustomerSerializer,
        responses={200: CustomerSerializer},
    )
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /customers/{pk}

        A body ``id`` that differs from the path is answered with 409.
        """
        data = request.data
        if not isinstance(data, Mapping) or data.get("id") is None:
            return _bad_request("Invalid Customer supplied in request body")

        body_id = _as_int(data["id"])
        if body_id is None:
            return _bad_request("Invalid Customer supplied in request body")

        if body_id != int(pk):
            return error_response(
                ServiceError(
                    kind=ErrorKind.CONFLICT,
                    message="Customer details supplied in request body conflict with another Customer",
                    fields={"id": ID_MISMATCH_MESSAGE},
                )
            )

        found = self._service.find_by_id(int(pk))
        if not found.ok:
            return error_response(found.error)

        try:
            dto = CustomerDTO.model_validate(dict(data))
        except PydanticValidationError as exc:
            return error_response(_validation_error(exc))

        result = self._service.update(dto)
        if not result.ok:
            return error_response(result.error)
        return Response(CustomerSerializer(result.value).data)

    @extend_schema(summary="Delete a Customer", responses={204: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /customers/{pk}"""
        found = self._service.find_by_id(int(pk))
        if not found.ok:
            return error_response(found.error)

        result = self._service.delete(found.value)
        if not result.ok:
            return error_response(result.error)
        return Response(status=status.HTTP_204_NO_CONTENT)


def _validation_error(exc: PydanticValidationError) -> ServiceError:
    return ServiceError(
        kind=ErrorKind.FIELD_VALIDATION,
        message="Bad Request",
        fields=field_errors(exc),
    )


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
