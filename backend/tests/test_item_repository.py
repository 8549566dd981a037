"""Tests for the SQL and JSON item repositories"""

import json

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from marketplace.models.base import Base
from marketplace.models import Item
from marketplace.services.item_repository import JsonItemRepository, SqlItemRepository
from marketplace.utils.errors import StorageError


@pytest.fixture
def db_session():
    """Create a test database session"""

    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)

    TestingSessionLocal = sessionmaker(bind=engine)
    session = TestingSessionLocal()

    yield session

    session.close()


@pytest.fixture(params=["sql", "json"])
def repo(request, db_session, tmp_path):
    if request.param == "sql":
        return SqlItemRepository(db_session)
    return JsonItemRepository(tmp_path / "items.json")


def test_empty_repository(repo):
    assert repo.list_items() == []
    assert repo.list_categories() == []
    assert repo.get_item(1) is None
    assert repo.get_category(1) is None


def test_add_and_get_item(repo):
    created = repo.add_item("jacket", "outerwear", "abc.jpg")

    fetched = repo.get_item(created.id)
    assert fetched == created
    assert fetched.name == "jacket"
    assert fetched.category == "outerwear"
    assert fetched.image_name == "abc.jpg"


def test_list_returns_all_items(repo):
    for i in range(4):
        repo.add_item(f"item-{i}", "misc", f"{i}.jpg")

    items = repo.list_items()
    assert len(items) == 4
    assert len({item.id for item in items}) == 4


def test_same_image_shared_by_items(repo):
    first = repo.add_item("a", "misc", "same.jpg")
    second = repo.add_item("b", "misc", "same.jpg")

    assert first.id != second.id
    assert {item.image_name for item in repo.list_items()} == {"same.jpg"}


def test_categories(repo):
    shoes = repo.add_category("shoes")
    again = repo.add_category("shoes")

    assert shoes.id != again.id
    assert repo.get_category(shoes.id).name == "shoes"
    assert [c.name for c in repo.list_categories()] == ["shoes", "shoes"]


def test_item_with_category_id(repo):
    shoes = repo.add_category("shoes")
    item = repo.add_item("boots", "shoes", "boots.jpg", category_id=shoes.id)

    assert repo.get_item(item.id).category == "shoes"


def test_sql_listing_prefers_category_table_name(db_session):
    """Items linked to a category report the category row's name"""

    repo = SqlItemRepository(db_session)
    shoes = repo.add_category("shoes")
    db_session.add(Item(name="boots", category="stale", category_id=shoes.id, image_name="b.jpg"))
    db_session.commit()

    assert [item.category for item in repo.list_items()] == ["shoes"]


def test_json_insertion_order_and_file_layout(tmp_path):
    path = tmp_path / "items.json"
    repo = JsonItemRepository(path)

    for name in ["first", "second", "third"]:
        repo.add_item(name, "misc", f"{name}.jpg")

    assert [item.name for item in repo.list_items()] == ["first", "second", "third"]

    document = json.loads(path.read_text())
    assert document["items"][0] == {"id": 1, "name": "first", "category": "misc", "image_name": "first.jpg"}
    assert document["categories"] == []


def test_json_records_without_id_use_position(tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps({"items": [
        {"name": "a", "category": "x", "image_name": "a.jpg"},
        {"id": 0, "name": "b", "category": "y", "image_name": "b.jpg"},
    ]}))

    repo = JsonItemRepository(path)
    assert [item.id for item in repo.list_items()] == [1, 2]
    assert repo.get_item(2).name == "b"


def test_json_corrupt_file_raises_storage_error(tmp_path):
    path = tmp_path / "items.json"
    path.write_text("{not json")

    with pytest.raises(StorageError):
        JsonItemRepository(path).list_items()


def test_json_non_object_raises_storage_error(tmp_path):
    path = tmp_path / "items.json"
    path.write_text("[]")

    with pytest.raises(StorageError):
        JsonItemRepository(path).add_item("a", "b", "c.jpg")


def test_sql_error_raises_storage_error(db_session):
    Base.metadata.drop_all(db_session.get_bind())

    with pytest.raises(StorageError):
        SqlItemRepository(db_session).list_items()
