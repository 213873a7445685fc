"""
Test helpers for exercising the /graphql/ endpoint
"""
import json

from django.test import TestCase

from predictions.client import (
    BasePredictionClient,
    PredictionResult,
    close_prediction_client,
    set_prediction_client,
)

REGISTER_MUTATION = """
mutation Register($email: String!, $name: String, $password: String!) {
    register(email: $email, name: $name, password: $password) {
        token
        user { id email name }
    }
}
"""

CREATE_STUDENT_MUTATION = """
mutation CreateStudent($name: String!) {
    createStudent(name: $name) { id name user { id } }
}
"""


class FakePredictionClient(BasePredictionClient):
    """In-memory prediction service recording every payload it receives"""

    def __init__(self, result=None, error=None):
        self.result = result or PredictionResult(predicted_grade=87.5, feedback="Keep it up")
        self.error = error
        self.payloads = []
        self.closed = False

    def predict(self, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return self.result

    def close(self):
        self.closed = True


class GraphQLTestCase(TestCase):
    """
    TestCase posting GraphQL documents to /graphql/

    A FakePredictionClient is installed for every test as self.prediction_client.
    """
    graphql_url = '/graphql/'

    def setUp(self):
        super().setUp()
        self.use_prediction_client(FakePredictionClient())
        self.addCleanup(close_prediction_client)

    def use_prediction_client(self, client):
        """Install `client` as the process-wide prediction client for this test"""
        self.prediction_client = client
        set_prediction_client(client)

    def query(self, query, variables=None, token=None):
        """
        Execute a GraphQL document

        Returns:
            tuple: (HttpResponse, decoded JSON body)
        """
        extra = {}
        if token is not None:
            extra['HTTP_AUTHORIZATION'] = f'Bearer {token}'

        response = self.client.post(
            self.graphql_url,
            data=json.dumps({'query': query, 'variables': variables or {}}),
            content_type='application/json',
            **extra
        )
        return response, response.json()

    def assertGraphQLError(self, body, message):
        """Assert the response failed and an error message contains `message`"""
        self.assertIn('errors', body)
        messages = [error['message'] for error in body['errors']]
        self.assertTrue(
            any(message in m for m in messages),
            f"{message!r} not found in {messages!r}"
        )

    def register(self, email='ann@example.com', password='pw1', name='Ann'):
        """Register a user and return (token, user dict)"""
        _, body = self.query(REGISTER_MUTATION, {'email': email, 'name': name, 'password': password})
        payload = body['data']['register']
        return payload['token'], payload['user']

    def create_student(self, token, name='S1'):
        _, body = self.query(CREATE_STUDENT_MUTATION, {'name': name}, token=token)
        return body['data']['createStudent']
