"""Item and category persistence backends"""

import json
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Category, Item
from ..schemas.category import CategoryResponse
from ..schemas.item import ItemResponse
from ..utils.errors import StorageError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ItemRepository(ABC):
    """Storage interface shared by the SQL and JSON backends"""

    @abstractmethod
    def add_category(self, name: str) -> CategoryResponse:
        ...

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[CategoryResponse]:
        ...

    @abstractmethod
    def list_categories(self) -> List[CategoryResponse]:
        ...

    @abstractmethod
    def add_item(
        self,
        name: str,
        category: str,
        image_name: str,
        category_id: Optional[int] = None
    ) -> ItemResponse:
        ...

    @abstractmethod
    def get_item(self, item_id: int) -> Optional[ItemResponse]:
        ...

    @abstractmethod
    def list_items(self) -> List[ItemResponse]:
        ...


class SqlItemRepository(ItemRepository):
    """
    Repository backed by a SQLAlchemy session

    Items keep their category as text; items created from a category id
    also keep the foreign key, and reads prefer the referenced name.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _storage_errors(self):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(str(e)) from e

    def add_category(self, name: str) -> CategoryResponse:
        with self._storage_errors():
            category = Category(name=name)
            self.db.add(category)
            self.db.commit()
            self.db.refresh(category)
            return CategoryResponse.model_validate(category)

    def get_category(self, category_id: int) -> Optional[CategoryResponse]:
        with self._storage_errors():
            category = self.db.query(Category).filter(Category.id == category_id).first()
            return CategoryResponse.model_validate(category) if category else None

    def list_categories(self) -> List[CategoryResponse]:
        with self._storage_errors():
            categories = self.db.query(Category).all()
            return [CategoryResponse.model_validate(c) for c in categories]

    def add_item(
        self,
        name: str,
        category: str,
        image_name: str,
        category_id: Optional[int] = None
    ) -> ItemResponse:
        with self._storage_errors():
            item = Item(
                name=name,
                category=category,
                category_id=category_id,
                image_name=image_name
            )
            self.db.add(item)
            self.db.commit()
            self.db.refresh(item)
            return ItemResponse.model_validate(item)

    def get_item(self, item_id: int) -> Optional[ItemResponse]:
        with self._storage_errors():
            row = self._item_query().filter(Item.id == item_id).first()
            return self._to_response(*row) if row else None

    def list_items(self) -> List[ItemResponse]:
        with self._storage_errors():
            return [self._to_response(item, name) for item, name in self._item_query().all()]

    def _item_query(self):
        return (
            self.db.query(Item, Category.name)
            .outerjoin(Category, Item.category_id == Category.id)
        )

    @staticmethod
    def _to_response(item: Item, category_name: Optional[str]) -> ItemResponse:
        return ItemResponse(
            id=item.id,
            name=item.name,
            category=category_name if category_name is not None else item.category,
            image_name=item.image_name
        )


class JsonItemRepository(ItemRepository):
    """
    Repository backed by a single JSON document

    Layout: ``{"items": [...], "categories": [...]}``. Ids are the record's
    position + 1; records written without an id get that one on read.
    Every operation rewrites or rereads the whole file under a
    process-local lock, so several processes sharing the file can still
    lose updates.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def add_category(self, name: str) -> CategoryResponse:
        with self._lock:
            document = self._load()
            record = {"id": len(document["categories"]) + 1, "name": name}
            document["categories"].append(record)
            self._save(document)
        return CategoryResponse(**record)

    def get_category(self, category_id: int) -> Optional[CategoryResponse]:
        for category in self.list_categories():
            if category.id == category_id:
                return category
        return None

    def list_categories(self) -> List[CategoryResponse]:
        with self._lock:
            document = self._load()
        return [
            CategoryResponse(**self._with_id(record, index))
            for index, record in enumerate(document["categories"])
        ]

    def add_item(
        self,
        name: str,
        category: str,
        image_name: str,
        category_id: Optional[int] = None
    ) -> ItemResponse:
        with self._lock:
            document = self._load()
            record = {
                "id": len(document["items"]) + 1,
                "name": name,
                "category": category,
                "image_name": image_name,
            }
            if category_id is not None:
                record["category_id"] = category_id
            document["items"].append(record)
            self._save(document)
        return ItemResponse(**record)

    def get_item(self, item_id: int) -> Optional[ItemResponse]:
        for item in self.list_items():
            if item.id == item_id:
                return item
        return None

    def list_items(self) -> List[ItemResponse]:
        with self._lock:
            document = self._load()
        return [
            ItemResponse(**self._with_id(record, index))
            for index, record in enumerate(document["items"])
        ]

    @staticmethod
    def _with_id(record: Dict, index: int) -> Dict:
        return {**record, "id": record.get("id") or index + 1}

    def _load(self) -> Dict[str, List[Dict]]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {"items": [], "categories": []}
        except OSError as e:
            raise StorageError(str(e)) from e

        try:
            document = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError as e:
            raise StorageError(str(e)) from e

        if not isinstance(document, dict):
            raise StorageError(f"{self.path} does not contain a JSON object")

        document.setdefault("items", [])
        document.setdefault("categories", [])
        return document

    def _save(self, document: Dict[str, List[Dict]]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise StorageError(str(e)) from e
        logger.debug("Items file written", path=str(self.path), items=len(document["items"]))
