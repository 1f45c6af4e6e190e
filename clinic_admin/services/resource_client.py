from typing import Any, ClassVar, Generic, List, Mapping, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from clinic_admin.constants import Resource
from clinic_admin.schemas import PersonBase
from clinic_admin.services.api_client import ApiClient, ApiError
from clinic_admin.utils.logger import get_logger

logger = get_logger("resources")

ModelT = TypeVar("ModelT", bound=PersonBase)


class ResourceClient(Generic[ModelT]):
    """CRUD over one ``/api/<resource>`` collection.

    Subclasses bind ``resource`` and ``model``. Errors from the transport are
    never caught here.
    """

    resource: ClassVar[Resource]
    model: ClassVar[Type[PersonBase]]

    def __init__(self, api: ApiClient):
        self.api = api
        self._list_adapter = TypeAdapter(List[self.model])

    @property
    def path(self) -> str:
        return self.resource.path

    def _item_path(self, item_id: str) -> str:
        if not item_id:
            raise ValueError(f"{self.resource.value}: id is required")
        return f"{self.path}/{item_id}"

    def _coerce(self, data: Union[ModelT, Mapping[str, Any]]) -> ModelT:
        if isinstance(data, self.model):
            return data
        return self.model.model_validate(data)

    def _decode(self, payload: Any) -> ModelT:
        try:
            return self.model.model_validate(payload)
        except ValidationError as e:
            raise ApiError(f"Invalid response payload for {self.model.__name__}: {e}") from e

    def _decode_list(self, payload: Any) -> List[ModelT]:
        try:
            return self._list_adapter.validate_python(payload)
        except ValidationError as e:
            raise ApiError(f"Invalid response payload for {self.model.__name__} list: {e}") from e

    async def get_all(self) -> List[ModelT]:
        return self._decode_list(await self.api.request(self.path))

    async def get_one(self, item_id: str) -> ModelT:
        return self._decode(await self.api.request(self._item_path(item_id)))

    async def create(self, data: Union[ModelT, Mapping[str, Any]]) -> ModelT:
        """POST a new entity; id and timestamps are stripped from the body."""
        entity = self._coerce(data)
        created = self._decode(
            await self.api.request(self.path, method="POST", body=entity.to_create_payload())
        )
        logger.info(f"Created {self.resource.value} {created.id}")
        return created

    async def update(self, item_id: str, data: Union[ModelT, Mapping[str, Any]]) -> ModelT:
        """PUT the full entity; server timestamps are not sent."""
        entity = self._coerce(data)
        path = self._item_path(item_id)
        updated = self._decode(
            await self.api.request(path, method="PUT", body=entity.to_update_payload())
        )
        logger.info(f"Updated {self.resource.value} {item_id}")
        return updated

    async def delete(self, item_id: str) -> None:
        await self.api.request(self._item_path(item_id), method="DELETE")
        logger.info(f"Deleted {self.resource.value} {item_id}")
