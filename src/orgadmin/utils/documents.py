"""Document-level helpers shared by the mutation resolvers."""

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from .logging import get_logger

if TYPE_CHECKING:  # pragma: no cover
    from mypy_boto3_dynamodb.service_resource import Table

logger = get_logger(__name__)

# DynamoDB batch_write_item accepts at most 25 requests
BATCH_SIZE = 25


def get_document(table: "Table", key_name: str, id_value: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Fetch a single document by primary key.

    Args:
        table: Table to read from
        key_name: Name of the hash key attribute
        id_value: Normalized ID; empty or None never matches

    Returns:
        The item, or None if it does not exist
    """
    if not id_value:
        return None
    response = table.get_item(Key={key_name: id_value})
    return response.get("Item")


def pull_from_lists(
    table: "Table", key: Dict[str, str], values_by_attribute: Dict[str, Iterable[str]]
) -> Optional[Dict[str, Any]]:
    """
    Remove values from list attributes of one document.

    Every occurrence of each value is removed. Attributes the document does not
    carry are left alone, and a list emptied by the pull stays as [].

    Args:
        table: Table holding the document
        key: Primary key of the document
        values_by_attribute: Values to remove, per list attribute

    Returns:
        The updated document, or None if the document does not exist
    """
    item = table.get_item(Key=key).get("Item")
    if item is None:
        return None

    update_expressions: List[str] = []
    expression_attribute_names: Dict[str, str] = {}
    expression_attribute_values: Dict[str, Any] = {}

    for index, (attribute, values) in enumerate(values_by_attribute.items()):
        current = item.get(attribute)
        if not isinstance(current, list):
            continue
        removed = set(values)
        update_expressions.append(f"#a{index} = :v{index}")
        expression_attribute_names[f"#a{index}"] = attribute
        expression_attribute_values[f":v{index}"] = [v for v in current if v not in removed]

    if not update_expressions:
        return item

    response = table.update_item(
        Key=key,
        UpdateExpression="SET " + ", ".join(update_expressions),
        ExpressionAttributeNames=expression_attribute_names,
        ExpressionAttributeValues=expression_attribute_values,
        ReturnValues="ALL_NEW",
    )
    return response["Attributes"]


def delete_documents(table: "Table", key_name: str, ids: Iterable[str]) -> int:
    """
    Delete many documents by primary key.

    Args:
        table: Table to delete from
        key_name: Name of the hash key attribute
        ids: IDs to delete; duplicates and empty values are ignored

    Returns:
        Number of delete requests issued
    """
    keys = list(dict.fromkeys(i for i in ids if i))
    deleted = 0

    for i in range(0, len(keys), BATCH_SIZE):
        batch = keys[i : i + BATCH_SIZE]
        with table.batch_writer() as batch_writer:
            for id_value in batch:
                batch_writer.delete_item(Key={key_name: id_value})
        deleted += len(batch)
        logger.debug(f"Deleted batch of {len(batch)} documents (total: {deleted})", table=table.name)

    return deleted
