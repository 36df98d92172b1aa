import json

import pytest

from app.common.errors import ValidationError
from app.features.problems.repository import problem_repository
from app.features.problems.schemas import ProblemSeedRow
from app.features.problems.seed import load_rows
from app.features.problems.service import seed_template

from helpers import CATALOG_SIZE, TEMPLATE, catalog_rows


def test_load_csv_expands_short_difficulty(tmp_path):
    path = tmp_path / "catalog.csv"
    path.write_text(
        "neet250_id,order_index,title,leetcode_slug,category,difficulty\n"
        "1,1,Contains Duplicate,contains-duplicate,Arrays & Hashing,E\n"
        "2,2,Group Anagrams,group-anagrams,Arrays & Hashing,m\n",
        encoding="utf-8",
    )
    rows = load_rows(path)
    assert [r.difficulty.value for r in rows] == ["Easy", "Medium"]
    assert rows[1].order_index == 2


def test_load_json_with_camel_case_keys(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"problems": [{
        "neet250Id": 7, "orderIndex": 1, "title": "Two Sum", "leetcodeSlug": "two-sum",
        "category": "Arrays & Hashing", "difficulty": "easy",
    }]}), encoding="utf-8")
    (row,) = load_rows(path)
    assert row.neet250_id == 7
    assert row.difficulty.value == "Easy"


def test_unsupported_file_type(tmp_path):
    with pytest.raises(ValidationError):
        load_rows(tmp_path / "catalog.xlsx")


def test_template_is_seeded_once(db):
    assert problem_repository.count(db, TEMPLATE) == CATALOG_SIZE
    with pytest.raises(ValidationError):
        seed_template(db, TEMPLATE, catalog_rows())


def test_order_indexes_must_be_dense(db):
    rows = catalog_rows(3)
    gap = rows[:2] + [rows[2].model_copy(update={"order_index": 5})]
    with pytest.raises(ValidationError):
        seed_template(db, "gaps.v1", gap)


def test_duplicate_slugs_rejected(db):
    rows = catalog_rows(2)
    dup = [rows[0], ProblemSeedRow(**{**rows[1].model_dump(), "leetcode_slug": rows[0].leetcode_slug})]
    with pytest.raises(ValidationError):
        seed_template(db, "dups.v1", dup)
