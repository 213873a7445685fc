"""
Tests for authentication: password hashing, tokens and the auth mutations
"""
from datetime import timedelta

import jwt
from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.db import IntegrityError, transaction
from django.test import TestCase, override_settings
from django.utils import timezone
from io import StringIO

from core.exceptions import InvalidToken
from core.security import hash_password, issue_token, verify_password, verify_token
from core.testing import GraphQLTestCase

User = get_user_model()

LOGIN_MUTATION = """
mutation Login($email: String!, $password: String!) {
    login(email: $email, password: $password) {
        token
        user { id email }
    }
}
"""

ME_QUERY = """
query { me { id email name students { id name } } }
"""


class PasswordHashingTest(TestCase):
    """Test hash_password / verify_password"""

    def test_hash_is_not_plaintext(self):
        hashed = hash_password('secret')
        self.assertNotEqual(hashed, 'secret')
        self.assertTrue(hashed.startswith('argon2'))

    def test_hash_is_salted(self):
        self.assertNotEqual(hash_password('secret'), hash_password('secret'))

    def test_verify(self):
        hashed = hash_password('secret')
        self.assertTrue(verify_password('secret', hashed))
        self.assertFalse(verify_password('Secret', hashed))

    def test_verify_empty_hash(self):
        self.assertFalse(verify_password('secret', ''))
        self.assertFalse(verify_password('secret', None))


class TokenTest(TestCase):
    """Test issue_token / verify_token"""

    def setUp(self):
        self.user = User.objects.create_user('tok@example.com', password='pw')

    def test_round_trip(self):
        payload = verify_token(issue_token(self.user))
        self.assertEqual(payload['user_id'], self.user.id)
        self.assertEqual(payload['type'], 'access')
        self.assertGreater(payload['exp'], payload['iat'])

    def test_tokens_are_unique(self):
        self.assertNotEqual(issue_token(self.user), issue_token(self.user))

    @override_settings(JWT_ACCESS_TOKEN_LIFETIME=timedelta(seconds=-10))
    def test_expired(self):
        token = issue_token(self.user)
        with self.assertRaisesMessage(InvalidToken, 'Token has expired'):
            verify_token(token)

    def test_bad_signature(self):
        token = jwt.encode(
            {'user_id': self.user.id, 'type': 'access', 'iat': timezone.now(),
             'exp': timezone.now() + timedelta(hours=1)},
            'another-secret',
            algorithm='HS256',
        )
        with self.assertRaises(InvalidToken):
            verify_token(token)

    def test_malformed(self):
        with self.assertRaises(InvalidToken):
            verify_token('not-a-jwt')

    def test_wrong_type(self):
        token = jwt.encode(
            {'user_id': self.user.id, 'type': 'refresh', 'iat': timezone.now(),
             'exp': timezone.now() + timedelta(hours=1)},
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaisesMessage(InvalidToken, 'Expected access token'):
            verify_token(token)

    def test_missing_expiry(self):
        token = jwt.encode(
            {'user_id': self.user.id, 'type': 'access', 'iat': timezone.now()},
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(InvalidToken):
            verify_token(token)


class RegisterTest(GraphQLTestCase):

    def test_register(self):
        token, user = self.register(email='a@x.com', name='Ann', password='pw1')

        self.assertEqual(user['email'], 'a@x.com')
        self.assertEqual(user['name'], 'Ann')
        self.assertEqual(verify_token(token)['user_id'], int(user['id']))

        stored = User.objects.get(email='a@x.com')
        self.assertNotEqual(stored.password, 'pw1')
        self.assertTrue(verify_password('pw1', stored.password))

    def test_register_without_name(self):
        response, body = self.query(
            'mutation { register(email: "n@x.com", password: "pw") { user { name } } }'
        )
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(body['data']['register']['user']['name'])

    def test_duplicate_email(self):
        self.register(email='a@x.com')

        response, body = self.query(
            'mutation { register(email: "a@x.com", password: "other") { token } }'
        )

        self.assertGraphQLError(body, 'Email already in use')
        self.assertIsNone(body['data'])
        self.assertEqual(response.status_code, 400)
        self.assertEqual(User.objects.filter(email__iexact='a@x.com').count(), 1)

    def test_duplicate_email_ignores_case(self):
        self.register(email='a@x.com')
        _, body = self.query(
            'mutation { register(email: "A@X.com", password: "other") { token } }'
        )
        self.assertGraphQLError(body, 'Email already in use')

    def test_password_is_not_exposed(self):
        self.register()
        _, body = self.query('query { users { password } }')
        self.assertIn('errors', body)


class EmailCaseTest(GraphQLTestCase):

    def test_create_user_lowercases_email(self):
        user = User.objects.create_user('Mixed@Example.COM', password='pw')
        self.assertEqual(user.email, 'mixed@example.com')

    def test_register_stores_lowercased_email(self):
        _, user = self.register(email='Ann@X.com')
        self.assertEqual(user['email'], 'ann@x.com')

    def test_create_user_rejects_case_variant(self):
        self.register(email='a@x.com')

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                User.objects.create_user('A@x.com', password='pw2')

        self.assertEqual(User.objects.filter(email__iexact='a@x.com').count(), 1)

    def test_database_rejects_case_variant(self):
        User.objects.create(email='b@x.com')

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                User.objects.create(email='B@X.com')

    def test_login_after_case_variant_attempt(self):
        self.register(email='a@x.com', password='pw1')
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                User.objects.create_user('A@x.com', password='pw2')

        response, body = self.query(LOGIN_MUTATION, {'email': 'A@X.COM', 'password': 'pw1'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(body['data']['login']['user']['email'], 'a@x.com')


class LoginTest(GraphQLTestCase):

    def setUp(self):
        super().setUp()
        self.token, self.user = self.register(email='a@x.com', password='pw1')

    def test_login(self):
        response, body = self.query(LOGIN_MUTATION, {'email': 'a@x.com', 'password': 'pw1'})

        self.assertEqual(response.status_code, 200)
        payload = body['data']['login']
        self.assertEqual(payload['user']['id'], self.user['id'])
        self.assertEqual(verify_token(payload['token'])['user_id'], int(self.user['id']))

    def test_wrong_password(self):
        response, body = self.query(LOGIN_MUTATION, {'email': 'a@x.com', 'password': 'nope'})

        self.assertGraphQLError(body, 'Invalid credentials')
        self.assertIsNone(body['data'])
        self.assertEqual(response.status_code, 401)

    def test_unknown_email(self):
        _, body = self.query(LOGIN_MUTATION, {'email': 'b@x.com', 'password': 'pw1'})
        self.assertGraphQLError(body, 'Invalid credentials')

    def test_inactive_user(self):
        User.objects.filter(email='a@x.com').update(is_active=False)
        _, body = self.query(LOGIN_MUTATION, {'email': 'a@x.com', 'password': 'pw1'})
        self.assertGraphQLError(body, 'Invalid credentials')


class MeTest(GraphQLTestCase):

    def setUp(self):
        super().setUp()
        self.token, self.user = self.register(email='a@x.com', name='Ann')

    def test_me(self):
        _, body = self.query(ME_QUERY, token=self.token)

        me = body['data']['me']
        self.assertEqual(me['id'], self.user['id'])
        self.assertEqual(me['email'], 'a@x.com')
        self.assertEqual(me['students'], [])

    def test_me_with_login_token(self):
        _, body = self.query(LOGIN_MUTATION, {'email': 'a@x.com', 'password': 'pw1'})
        login_token = body['data']['login']['token']

        _, body = self.query(ME_QUERY, token=login_token)
        self.assertEqual(body['data']['me']['id'], self.user['id'])

    def test_me_lists_students(self):
        self.create_student(self.token, name='S1')
        _, body = self.query(ME_QUERY, token=self.token)
        self.assertEqual([s['name'] for s in body['data']['me']['students']], ['S1'])

    def test_missing_header(self):
        response, body = self.query(ME_QUERY)

        self.assertGraphQLError(body, 'Not authenticated')
        self.assertIsNone(body['data']['me'])
        self.assertEqual(response.status_code, 401)

    def test_wrong_scheme(self):
        response = self.client.post(
            self.graphql_url,
            data={'query': ME_QUERY},
            content_type='application/json',
            HTTP_AUTHORIZATION=f'Token {self.token}',
        )
        self.assertGraphQLError(response.json(), 'Bearer scheme')
        self.assertEqual(response.status_code, 401)

    def test_invalid_token(self):
        response, body = self.query(ME_QUERY, token='garbage')
        self.assertGraphQLError(body, 'Invalid token')
        self.assertEqual(response.status_code, 401)

    def test_deleted_user(self):
        User.objects.filter(id=self.user['id']).delete()
        _, body = self.query(ME_QUERY, token=self.token)
        self.assertGraphQLError(body, 'User not found or inactive')

    def test_session_login_is_not_enough(self):
        user = User.objects.get(id=self.user['id'])
        self.client.force_login(user)
        _, body = self.query(ME_QUERY)
        self.assertGraphQLError(body, 'Not authenticated')


class UsersQueryTest(GraphQLTestCase):

    def test_users_is_public(self):
        self.register(email='a@x.com')
        self.register(email='b@x.com')

        response, body = self.query('query { users { email } }')

        self.assertEqual(response.status_code, 200)
        self.assertEqual([u['email'] for u in body['data']['users']], ['a@x.com', 'b@x.com'])


class SeedDemoCommandTest(TestCase):

    def test_seed_is_repeatable(self):
        call_command('seed_demo', stdout=StringIO())
        call_command('seed_demo', stdout=StringIO())

        user = User.objects.get(email='demo@example.com')
        self.assertTrue(user.check_password('demo1234'))
        self.assertEqual(user.students.count(), 2)
        self.assertEqual(
            sorted(s.grades.count() for s in user.students.all()),
            [3, 4]
        )

    def test_seed_resets_password_of_existing_user(self):
        call_command('seed_demo', stdout=StringIO())
        call_command('seed_demo', '--password', 'changed99', stdout=StringIO())

        user = User.objects.get(email='demo@example.com')
        self.assertTrue(user.check_password('changed99'))
        self.assertFalse(user.check_password('demo1234'))
