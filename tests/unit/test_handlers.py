"""
Tests for the single-item pass-throughs and raw escape hatches.
"""

from unittest.mock import Mock

import dynamodb_utils as ddbutil
from dynamodb_utils import raw
from dynamodb_utils.core import DocumentStore


class TestPassThroughs:
    """Test get/put/update/delete pass straight to the client."""

    def test_get(self, store):
        store.get_item.return_value = {'Item': {'id': {'S': '1'}}}
        params = {'TableName': 't', 'Key': {'id': {'S': '1'}}}

        assert ddbutil.get(store, params) == {'Item': {'id': {'S': '1'}}}
        store.get_item.assert_called_once_with(**params)

    def test_put(self, store):
        params = {'TableName': 't', 'Item': {'id': {'S': '1'}}}

        ddbutil.put(store, params)

        store.put_item.assert_called_once_with(**params)

    def test_update(self, store):
        params = {
            'TableName': 't',
            'Key': {'id': {'S': '1'}},
            'UpdateExpression': 'SET #n = :n',
            'ExpressionAttributeNames': {'#n': 'name'},
            'ExpressionAttributeValues': {':n': {'S': 'x'}},
        }

        ddbutil.update(store, params)

        store.update_item.assert_called_once_with(**params)

    def test_delete(self, store):
        params = {'TableName': 't', 'Key': {'id': {'S': '1'}}}

        ddbutil.delete(store, params)

        store.delete_item.assert_called_once_with(**params)


class TestRawEscapeHatches:
    """Test raw.* make exactly one call and return it untouched."""

    def test_raw_query_returns_single_page(self, store):
        page = {'Items': [1], 'LastEvaluatedKey': {'id': 1}}
        store.query.return_value = page

        assert raw.query(store, {'TableName': 't'}) is page
        store.query.assert_called_once_with(TableName='t')

    def test_raw_scan(self, store):
        store.scan.return_value = {'Items': []}

        raw.scan(store, {'TableName': 't', 'Limit': 1})

        store.scan.assert_called_once_with(TableName='t', Limit=1)

    def test_raw_batch_write_does_not_retry(self, store):
        store.batch_write_item.return_value = {'UnprocessedItems': {'t': [{}]}}

        raw.batch_write(store, {'RequestItems': {'t': [{}]}})

        assert store.batch_write_item.call_count == 1

    def test_raw_batch_get(self, store):
        raw.batch_get(store, {'RequestItems': {'t': {'Keys': []}}})

        store.batch_get_item.assert_called_once_with(RequestItems={'t': {'Keys': []}})


class TestDocumentStoreProtocol:

    def test_mock_client_satisfies_protocol(self):
        assert isinstance(Mock(), DocumentStore)

    def test_object_without_batch_methods_does_not(self):
        class QueryOnly:
            def query(self, **kwargs):
                return {}

        assert not isinstance(QueryOnly(), DocumentStore)
