import pytest

from core.models import AttributeEntity, CategoryAttributeEntity


@pytest.mark.parametrize(
    "column",
    [
        AttributeEntity.__table__.c.id,
        AttributeEntity.__table__.c.unit,
        CategoryAttributeEntity.__table__.c.id,
        CategoryAttributeEntity.__table__.c.category_id,
        CategoryAttributeEntity.__table__.c.attribute_id,
    ],
    ids=lambda column: f"{column.table.name}.{column.name}",
)
def test_values_without_domain_limit_are_unbounded(column):
    assert column.type.length is None


def test_columns_follow_domain_limits():
    columns = AttributeEntity.__table__.c

    assert columns.name.type.length == 100
    assert columns.slug.type.length == 50


def test_long_unit_and_ids_are_stored(
    attribute_repo, category_attribute_repo, make_attribute, make_category_attribute
):
    attribute = make_attribute(id="a" * 200, unit="millimetres of mercury, gauge")
    attribute_repo.insert(attribute)
    assignment = make_category_attribute(
        id="c" * 200, category_id="k" * 200, attribute_id=attribute.id
    )
    category_attribute_repo.insert(assignment)

    assert attribute_repo.find_by_id("a" * 200).unit == "millimetres of mercury, gauge"
    assert category_attribute_repo.find_by_id("c" * 200).category_id == "k" * 200
