"""Resource facades mapping Tracelink operations onto POST endpoints.

Module names (``timereg``, ``purchase``, ``genobj`` ...) are open ended and
interpolated into paths as given; an unknown module only shows up as an error
envelope from the service. Deletes are updates carrying ``xdelete``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tracelink.dispatcher import Dispatcher
from tracelink.params import build_list_params
from tracelink.schemas import DocumentUpload, Envelope, ListOptions, RequestOptions, coerce

DELETE_MARKER = {"xdelete": "1"}
DEFAULT_NUMBER_BEGIN = 1000
DEFAULT_NUMBER_OFFSET = 1

Options = RequestOptions | Mapping[str, Any] | None
ListOpts = ListOptions | Mapping[str, Any] | None


def _document_fields(document: DocumentUpload | Mapping[str, Any]) -> dict[str, Any]:
    doc = coerce(DocumentUpload, document)
    fields: dict[str, Any] = {
        "image_data_encoded": doc.data,
        "image_description": doc.filename,
    }
    if doc.type is not None:
        fields["image_type"] = doc.type
    return fields


class _Resource:
    def __init__(self, dispatcher: Dispatcher):
        self.dispatcher = dispatcher

    def _send(self, endpoint: str, body: dict[str, Any] | None = None, options: Options = None) -> Envelope:
        return self.dispatcher.dispatch(endpoint, body, options)

    def _send_object(self, endpoint: str, obj: Mapping[str, Any], options: Options = None) -> Envelope:
        return self.dispatcher.dispatch(endpoint, {"object": dict(obj)}, options)

    def _list(self, endpoint: str, options: ListOpts) -> Envelope:
        return self.dispatcher.dispatch(endpoint, build_list_params(options))


class CompanyResource(_Resource):
    def get(self) -> Envelope:
        """Master data of the current company."""
        return self._send("/company")

    def list_departments(self, options: ListOpts = None) -> Envelope:
        return self._list("/company/dept/list", options)


class UserResource(_Resource):
    def get(self) -> Envelope:
        """The user owning the access token."""
        return self._send("/user")

    def list(self, options: ListOpts = None) -> Envelope:
        return self._list("/user/list", options)

    def list_groups(self, options: ListOpts = None) -> Envelope:
        return self._list("/user/group/list", options)


class OrderResource(_Resource):
    def create(self, data: Mapping[str, Any], options: Options = None) -> Envelope:
        return self._send_object("/tracelink/order/create", data, options)

    def create_auto_numbered(
        self,
        data: Mapping[str, Any],
        number_begin: int | None = DEFAULT_NUMBER_BEGIN,
        number_offset: int | None = DEFAULT_NUMBER_OFFSET,
        options: Options = None,
    ) -> Envelope:
        """Create an order and let the service assign the next free number.

        Numbering starts at ``number_begin`` and steps by ``number_offset``.
        """
        obj = {
            **data,
            "use_numbering": 1,
            "number_begin": DEFAULT_NUMBER_BEGIN if number_begin is None else number_begin,
            "number_offset": DEFAULT_NUMBER_OFFSET if number_offset is None else number_offset,
        }
        return self._send_object("/tracelink/order/create", obj, options)

    def get(self, order_id: int | str) -> Envelope:
        return self._send(f"/tracelink/order/{order_id}")

    def list(self, options: ListOpts = None) -> Envelope:
        return self._list("/tracelink/order/list", options)

    def update(self, order_id: int | str, data: Mapping[str, Any], options: Options = None) -> Envelope:
        return self._send_object("/tracelink/order/update", {"order_id": order_id, **data}, options)

    def delete(self, order_id: int | str) -> Envelope:
        return self._send_object("/tracelink/order/update", {"order_id": order_id, **DELETE_MARKER})

    def upload_document(self, order_id: int | str, document: DocumentUpload | Mapping[str, Any]) -> Envelope:
        """Attach a document; ``document.data`` must already be base64 encoded."""
        obj = {"order_id": order_id, **_document_fields(document)}
        return self._send_object("/tracelink/order/update", obj)

    def add_module(self, module_name: str, data: Mapping[str, Any], options: Options = None) -> Envelope:
        return self._send_object(f"/tracelink/order/add/object/module/{module_name}", data, options)

    def list_module(
        self,
        module_name: str,
        order_id: int | str | None = None,
        order_sub_id: int | str | None = None,
        options: ListOpts = None,
    ) -> Envelope:
        """List module entries, optionally narrowed to an order and one of its suborders.

        A falsy id (``None``, ``0``, ``""``) counts as not supplied. The
        suborder segment is only added below an order id.
        """
        endpoint = f"/tracelink/order/list/module/{module_name}"
        if order_id:
            endpoint += f"/{order_id}"
            if order_sub_id:
                endpoint += f"/{order_sub_id}"
        return self._list(endpoint, options)

    def update_module(self, module_name: str, data: Mapping[str, Any], options: Options = None) -> Envelope:
        return self._send_object(f"/tracelink/order/update/object/module/{module_name}", data, options)

    def delete_module(self, module_name: str, id_field: str, id_value: int | str) -> Envelope:
        return self._send_object(
            f"/tracelink/order/update/object/module/{module_name}",
            {id_field: id_value, **DELETE_MARKER},
        )


class SuborderResource(_Resource):
    def create(self, parent_order_id: int | str, data: Mapping[str, Any], options: Options = None) -> Envelope:
        return self._send_object(
            "/tracelink/suborder/create",
            {"parent_order_id": parent_order_id, **data},
            options,
        )

    def get(self, order_sub_id: int | str) -> Envelope:
        return self._send(f"/tracelink/suborder/{order_sub_id}")

    def list(self, options: ListOpts = None) -> Envelope:
        return self._list("/tracelink/suborder/list", options)

    def update(self, order_sub_id: int | str, data: Mapping[str, Any], options: Options = None) -> Envelope:
        return self._send_object("/tracelink/suborder/update", {"order_sub_id": order_sub_id, **data}, options)

    def delete(self, order_sub_id: int | str) -> Envelope:
        return self._send_object("/tracelink/suborder/update", {"order_sub_id": order_sub_id, **DELETE_MARKER})


class ObjectResource(_Resource):
    """Generic module objects and module-to-module relations."""

    def create_tag(self, product_id: str, count: int = 1) -> Envelope:
        """Reserve ``count`` new tag ids for a QR-code module product."""
        return self._send_object("/object/create", {"count": count, "product_id": product_id})

    def create(self, module_name: str, data: Mapping[str, Any], options: Options = None) -> Envelope:
        return self._send_object(f"/object/create/{module_name}", data, options)

    def get(self, module_name: str, object_id: int | str) -> Envelope:
        return self._send(f"/object/list/module/{module_name}/{object_id}")

    def list(self, module_name: str, options: ListOpts = None) -> Envelope:
        return self._list(f"/object/list/module/{module_name}", options)

    def update(self, module_name: str, data: Mapping[str, Any], options: Options = None) -> Envelope:
        return self._send_object(f"/object/update/{module_name}", data, options)

    def delete(self, module_name: str, id_field: str, id_value: int | str) -> Envelope:
        return self._send_object(f"/object/update/{module_name}", {id_field: id_value, **DELETE_MARKER})

    def upload_document(
        self,
        module_name: str,
        id_field: str,
        id_value: int | str,
        document: DocumentUpload | Mapping[str, Any],
    ) -> Envelope:
        obj = {id_field: id_value, **_document_fields(document)}
        return self._send_object(f"/object/update/{module_name}", obj)

    def create_relation(
        self, from_module: str, to_module: str, data: Mapping[str, Any], options: Options = None
    ) -> Envelope:
        return self._send_object(f"/object/module/create/{from_module}/to/{to_module}", data, options)

    def list_relations(
        self,
        from_module: str,
        to_module: str,
        to_module_id: int | str | None = None,
        options: ListOpts = None,
    ) -> Envelope:
        endpoint = f"/object/module/list/{from_module}/to/{to_module}"
        if to_module_id:
            endpoint += f"/{to_module_id}"
        return self._list(endpoint, options)

    def update_relation(
        self, from_module: str, to_module: str, data: Mapping[str, Any], options: Options = None
    ) -> Envelope:
        return self._send_object(f"/object/module/update/{from_module}/to/{to_module}", data, options)

    def delete_relation(self, from_module: str, to_module: str, id_field: str, id_value: int | str) -> Envelope:
        return self._send_object(
            f"/object/module/update/{from_module}/to/{to_module}",
            {id_field: id_value, **DELETE_MARKER},
        )


class UtilResource(_Resource):
    def list_documents(self, module_name: str, options: ListOpts = None) -> Envelope:
        return self._list(f"/util/doc/list/module/{module_name}", options)
