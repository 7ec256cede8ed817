"""
Test configuration and fixtures for dynamodb-utils.

Provides stubbed DynamoDB clients for unit tests and a moto-backed boto3
client for integration tests.
"""

import sys
from pathlib import Path

# Add parent directory to path so we can import dynamodb_utils
sys.path.insert(0, str(Path(__file__).parent.parent))

from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

from dynamodb_utils import UtilsConfig


@pytest.fixture
def utils_config():
    """Configuration with the DynamoDB defaults, independent of the environment."""
    return UtilsConfig(
        write_chunk_size=25,
        get_chunk_size=100,
        max_pages=10000,
        max_items=None,
        max_unprocessed_retries=None,
        retry_base_delay=0.0,
        retry_max_delay=20.0,
        enable_debug_logging=False
    )


@pytest.fixture
def input_set():
    """Five small items, as written or deleted by the batch tests."""
    return [
        {'f1': 11, 'f2': 21},
        {'f1': 12, 'f2': 22},
        {'f1': 13, 'f2': 23},
        {'f1': 14, 'f2': 24},
        {'f1': 15, 'f2': 25},
    ]


@pytest.fixture
def result_sets():
    """Two Query/Scan pages: three items, then two."""
    return [
        [
            {'f1': 11, 'f2': 21},
            {'f1': 12, 'f2': 22},
            {'f1': 13, 'f2': 23},
        ],
        [
            {'f1': 14, 'f2': 24},
            {'f1': 15, 'f2': 25},
        ],
    ]


@pytest.fixture
def store():
    """Stub DynamoDB client; tests program its methods with side_effect."""
    return Mock()


@pytest.fixture
def make_items():
    """Factory for n distinct items."""
    def _make_items(n):
        return [{'pk': f'item-{i:04d}', 'value': i} for i in range(n)]
    return _make_items


# Integration fixtures

@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never reaches real AWS."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')


@pytest.fixture
def mock_dynamodb_client(aws_credentials):
    """Low-level DynamoDB client backed by moto."""
    with mock_aws():
        yield boto3.client('dynamodb', region_name='us-east-1')


@pytest.fixture
def items_table(mock_dynamodb_client):
    """Hash-key only table named 'test_items'."""
    mock_dynamodb_client.create_table(
        TableName='test_items',
        KeySchema=[
            {'AttributeName': 'pk', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'pk', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )
    return 'test_items'


@pytest.fixture
def events_table(mock_dynamodb_client):
    """Hash + range key table named 'test_events'."""
    mock_dynamodb_client.create_table(
        TableName='test_events',
        KeySchema=[
            {'AttributeName': 'stream_id', 'KeyType': 'HASH'},
            {'AttributeName': 'seq', 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'stream_id', 'AttributeType': 'S'},
            {'AttributeName': 'seq', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )
    return 'test_events'
