# PURPOSE: Helper functions to interact with DynamoDB for profile storage.
# CONTEXT: Backs the authoritative (slower) side of the profile store.

from __future__ import annotations
import os
import json
from decimal import Decimal
from typing import Any, Dict, Optional
import boto3
from botocore.exceptions import ClientError


def _table():
    """
    Resolve the profile table from the environment on each call.

    notes:
    - Reading env lazily lets tests and deployments switch tables without re-import.
    """
    name = os.getenv("DDB_PROFILE_TABLE", "user_profiles")
    region = os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "eu-west-2"
    return boto3.resource("dynamodb", region_name=region).Table(name)


def _to_dynamo(item: Dict[str, Any]) -> Dict[str, Any]:
    # DynamoDB rejects Python floats; round-trip through JSON to get Decimals.
    return json.loads(json.dumps(item), parse_float=Decimal)


def get_item(user_id: str) -> Optional[Dict[str, Any]]:
    """
    Retrieve one item (by user_id) from DynamoDB.

    parameters:
    - user_id: str – the table's partition key.

    returns:
    - dict or None – the stored record, or None if not found.

    raises:
    - RuntimeError – if the DynamoDB request fails (wraps ClientError for readability).
    """
    try:
        res = _table().get_item(Key={"user_id": user_id})
        return res.get("Item")
    except ClientError as e:
        raise RuntimeError(f"DDB get_item failed: {e.response['Error']['Message']}")


def put_item(item: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insert or replace a full record in DynamoDB.

    parameters:
    - item: dict – full object to store (must include 'user_id').

    returns:
    - dict – confirmation message {"ok": True} on success.

    raises:
    - RuntimeError – if DynamoDB put_item fails.
    """
    try:
        _table().put_item(Item=_to_dynamo(item))
        return {"ok": True}
    except ClientError as e:
        raise RuntimeError(f"DDB put_item failed: {e.response['Error']['Message']}")