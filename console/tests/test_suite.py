from importlib import import_module
from unittest import mock
import logging

import requests
from django.conf import settings
from django.core.cache import cache
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework import status
from rest_framework.test import APITestCase

from console.tests.fake_api import FakeApi
from console.utils.api_repository import AUTH_FAILED_MESSAGE, ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY

logger = logging.getLogger(__name__)

MENU = {
    'menuItems': [{
        'menuItemId': 1,
        'name': 'Burger',
        'variations': [{'id': 11, 'name': 'Regular', 'price': 10}, {'id': 12, 'name': 'Large', 'price': 14}],
        'modifiers': [{'id': 21, 'name': 'Cheese', 'price': 2}],
        'customizations': [{'id': 31, 'name': 'Sauce', 'options': [{'id': 311, 'name': 'Garlic', 'price': 1.5}]}],
    }, {
        'menuItemId': 2,
        'name': 'Soup of the day',
        'variations': [],
    }],
    'deals': [{'dealId': 7, 'name': 'Family', 'price': 40, 'discount': {'value': 10}}],
    'subMenuItems': [{'subMenuItemId': 4, 'name': 'Fries', 'price': 3}],
    'currency': 'PKR',
}

CONFIGURATION = {
    'discountPercentage': 10,
    'serviceChargePercentage': 2,
    'taxPercentage': 5,
    'isDiscountOnTotal': True,
}

ORDER_ITEMS = [
    {
        'type': 'menuItem',
        'id': 1,
        'variant_id': 11,
        'quantity': 2,
        'modifiers': [{'modifier_id': 21, 'quantity': 2}],
        'customizations': [{'customization_id': 31, 'option_id': 311}],
    },
    {'type': 'deal', 'id': 7},
    {'type': 'subItem', 'id': 4, 'quantity': 3},
]


class BaseTestCase(APITestCase):
    """Signs in against a fake remote API before each test"""
    auto_login = True
    branch_ids = None

    def setUp(self):
        logger.info(f"\n{'='*50}\nStarting test: {self._testMethodName}\n{'='*50}")
        cache.clear()
        self.api = FakeApi()
        patcher = mock.patch.object(requests.Session, 'request', side_effect=self.api.handle)
        patcher.start()
        self.addCleanup(patcher.stop)
        if self.auto_login:
            self.login()

    def login(self):
        payload = {
            'token': 'access-1',
            'refreshToken': 'refresh-1',
            'userId': 42,
            'email': 'admin@test.com',
            'fullName': 'Test Admin',
            'roles': ['Admin'],
        }
        if self.branch_ids is not None:
            payload['branchIds'] = self.branch_ids
        self.api.add('POST', '/api/User/login', 200, payload)
        response = self.client.post('/accounts/login/', {
            'email': 'admin@test.com',
            'password': 'admin123'
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK, f"Login failed: {response.content}")
        return response


class AuthenticationTests(BaseTestCase):
    auto_login = False

    def test_login(self):
        response = self.login()
        user = response.json()['user']
        self.assertEqual(user['id'], '42')
        self.assertEqual(user['email'], 'admin@test.com')
        self.assertEqual(user['roles'], ['Admin'])
        sent = self.api.sent('POST', '/api/User/login')[0]
        self.assertEqual(sent['json'], {'email': 'admin@test.com', 'password': 'admin123'})
        self.assertNotIn('Authorization', sent['headers'])

    def test_tokens_stay_on_the_server(self):
        self.login()
        session_key = self.client.cookies[settings.SESSION_COOKIE_NAME].value
        self.assertNotIn('access-1', session_key)
        self.assertNotIn('refresh-1', session_key)

        stored = import_module(settings.SESSION_ENGINE).SessionStore(session_key=session_key)
        self.assertEqual(stored[ACCESS_TOKEN_KEY], 'access-1')
        self.assertEqual(stored[REFRESH_TOKEN_KEY], 'refresh-1')

    def test_login_with_bad_credentials(self):
        self.api.add('POST', '/api/User/login', 401, {'message': 'Invalid credentials'})
        response = self.client.post('/accounts/login/', {'email': 'a@b.c', 'password': 'x'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['error'], 'Login failed. Please check your credentials.')

    def test_login_requires_credentials(self):
        response = self.client.post('/accounts/login/', {'email': 'a@b.c'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self.api.requests, [])

    def test_requests_without_session_are_rejected(self):
        response = self.client.get('/menu/deals/', {'branch_id': 1})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.api.requests, [])

    def test_logout(self):
        self.login()
        response = self.client.post('/accounts/logout/', format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        response = self.client.get('/menu/deals/', {'branch_id': 1})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class TokenRefreshTests(BaseTestCase):

    def test_expired_token_is_refreshed_and_kept_in_session(self):
        self.api.add('GET', '/api/Deals/branch/1', 401, {'message': 'Token expired'})
        self.api.add('GET', '/api/Deals/branch/1', 200, [{'id': 7}])
        self.api.add('POST', '/api/auth/refresh', 200, {'accessToken': 'access-2', 'refreshToken': 'refresh-2'})
        self.api.add('GET', '/api/MenuCategory/branch/1', 200, [])

        response = self.client.get('/menu/deals/', {'branch_id': 1})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [{'id': 7}])

        deal_calls = self.api.sent('GET', '/api/Deals/branch/1')
        self.assertEqual(len(deal_calls), 2)
        self.assertEqual(deal_calls[1]['headers']['Authorization'], 'Bearer access-2')
        self.assertEqual(self.api.sent('POST', '/api/auth/refresh')[0]['json'], {'refreshToken': 'refresh-1'})

        self.client.get('/menu/categories/', {'branch_id': 1})
        category_call = self.api.sent('GET', '/api/MenuCategory/branch/1')[0]
        self.assertEqual(category_call['headers']['Authorization'], 'Bearer access-2')

    def test_failed_refresh_ends_the_session(self):
        self.api.add('GET', '/api/Deals/branch/1', 401)
        self.api.add('POST', '/api/auth/refresh', 401, {'message': 'Refresh token revoked'})

        response = self.client.get('/menu/deals/', {'branch_id': 1})
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['error'], AUTH_FAILED_MESSAGE)

        response = self.client.get('/menu/deals/', {'branch_id': 1})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_explicit_refresh(self):
        self.api.add('POST', '/api/auth/refresh', 200, {'accessToken': 'access-2'})
        response = self.client.post('/accounts/token/refresh/', format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)


class BranchAccessTests(BaseTestCase):
    branch_ids = [1]

    def test_other_branches_are_forbidden(self):
        self.api.add('GET', '/api/Deals/branch/1', 200, [])
        self.assertEqual(self.client.get('/menu/deals/', {'branch_id': 1}).status_code, status.HTTP_200_OK)
        self.assertEqual(self.client.get('/menu/deals/', {'branch_id': 2}).status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.client.get('/branches/2/configuration/').status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(len(self.api.sent('GET', '/api/Deals/branch/1')), 1)


class OrderPreviewTests(BaseTestCase):

    def setUp(self):
        super().setUp()
        self.api.add('GET', '/api/customer-search/branch/1/menu', 200, MENU)
        self.api.add('GET', '/api/Branch/1/configuration', 200, CONFIGURATION)

    def preview(self, items, **extra):
        return self.client.post('/orders/preview/', {'branch_id': 1, 'items': items, **extra}, format='json')

    def test_preview_totals(self):
        response = self.preview(ORDER_ITEMS)
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.content)
        data = response.json()

        self.assertEqual([line['unit_price'] for line in data['lines']], [15.5, 36.0, 3.0])
        self.assertEqual([line['line_total'] for line in data['lines']], [31.0, 36.0, 9.0])
        self.assertEqual(data['totals'], {
            'sub_total': 76.0,
            'discount_amount': 7.6,
            'taxable_amount': 68.4,
            'tax_amount': 3.42,
            'service_charges': 1.37,
            'tip_amount': 0.0,
            'total_amount': 73.19,
        })
        self.assertEqual(data['currency'], 'PKR')
        self.assertEqual(data['formatted_total'], '₨73.19')
        self.assertTrue(data['is_discount_on_total'])

    def test_preview_in_discount_on_tax_mode(self):
        self.api.routes[('GET', '/api/Branch/1/configuration')] = [(200, {**CONFIGURATION, 'isDiscountOnTotal': False})]
        response = self.preview([{'type': 'subItem', 'id': 4, 'quantity': 10}], tip_amount='-5')
        totals = response.json()['totals']
        self.assertEqual(totals['sub_total'], 30.0)
        self.assertEqual(totals['tax_amount'], 1.5)
        self.assertEqual(totals['discount_amount'], 0.15)
        self.assertEqual(totals['tip_amount'], 0.0)
        self.assertEqual(totals['total_amount'], 31.95)

    def test_empty_order(self):
        response = self.preview([])
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['totals']['total_amount'], 0.0)

    def test_item_without_variations(self):
        response = self.preview([{'type': 'menuItem', 'id': 2}])
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("doesn't have any variations", response.json()['error'])

    def test_item_not_on_menu(self):
        response = self.preview([{'type': 'deal', 'id': 404}])
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_malformed_draft(self):
        response = self.preview([{'type': 'pizza', 'id': 1}])
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['error'], 'Invalid order')

    def test_missing_branch_configuration(self):
        self.api.routes[('GET', '/api/Branch/1/configuration')] = [(200, None)]
        response = self.preview(ORDER_ITEMS)
        self.assertEqual(response.status_code, status.HTTP_424_FAILED_DEPENDENCY)

    def test_menu_edits_reprice_the_next_preview(self):
        deal = [{'type': 'deal', 'id': 7}]
        self.assertEqual(self.preview(deal).json()['lines'][0]['unit_price'], 36.0)

        self.api.add('PUT', '/api/Deals/7', 200, {'dealId': 7, 'price': 100})
        self.api.add('GET', '/api/customer-search/branch/1/menu', 200,
                     {**MENU, 'deals': [{'dealId': 7, 'name': 'Family', 'price': 100, 'discount': {'value': 10}}]})
        response = self.client.put('/menu/deals/7/', {
            'branch_id': 1,
            'name': 'Family',
            'price': 100,
            'menuItems': [{'menuItemId': 1, 'variantId': 11, 'quantity': 2}],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.content)

        self.assertEqual(self.preview(deal).json()['lines'][0]['unit_price'], 90.0)
        self.assertEqual(len(self.api.sent('GET', '/api/customer-search/branch/1/menu')), 2)

    def test_every_price_source_clears_the_cached_menu(self):
        self.preview([])
        writes = [
            ('POST', '/api/MenuItem', '/menu/menu-items/',
             {'name': 'Wrap', 'menuCategoryId': 2, 'variations': [{'name': 'Regular', 'price': 6}]}),
            ('PUT', '/api/SubMenuItems/4', '/menu/sub-menu-items/4/', {'name': 'Fries', 'price': 4}),
            ('DELETE', '/api/Discount/5', '/menu/discounts/5/', None),
        ]
        for count, (method, remote_path, path, body) in enumerate(writes, start=2):
            self.api.add(method, remote_path, 200, {})
            if method == 'DELETE':
                response = self.client.delete(path)
            else:
                call = self.client.post if method == 'POST' else self.client.put
                response = call(path, {'branch_id': 1, **body}, format='json')
            self.assertLess(response.status_code, 300, response.content)
            self.preview([])
            self.assertEqual(len(self.api.sent('GET', '/api/customer-search/branch/1/menu')), count, path)

    def test_menu_unavailable(self):
        self.api.routes[('GET', '/api/customer-search/branch/1/menu')] = [(503, {'message': 'Down for maintenance'})]
        response = self.preview(ORDER_ITEMS)
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.json()['error'], 'Down for maintenance')


class OrderTests(BaseTestCase):

    def setUp(self):
        super().setUp()
        self.api.add('GET', '/api/customer-search/branch/1/menu', 200, MENU)
        self.api.add('GET', '/api/Branch/1/configuration', 200, CONFIGURATION)
        self.api.add('GET', '/api/Order/ByBranch', 200, {'items': [], 'totalCount': 0})
        self.api.add('POST', '/api/orders', 200, {'orderId': 99, 'orderNumber': 'ORD-99'})

    def test_order_list_query(self):
        response = self.client.get('/orders/', {'branch_id': 1, 'page': 2, 'page_size': 20, 'search': 'Ali'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        sent = self.api.sent('GET', '/api/Order/ByBranch')[0]
        self.assertEqual(sent['params'], {
            'BranchId': '1',
            'PageNumber': '2',
            'PageSize': '20',
            'SortBy': 'createdAt',
            'IsAscending': 'false',
            'SearchTerm': 'Ali',
        })

    def test_unsupported_page_size_uses_default(self):
        self.client.get('/orders/', {'branch_id': 1, 'page_size': 7})
        self.assertEqual(self.api.sent('GET', '/api/Order/ByBranch')[0]['params']['PageSize'], '10')

    def test_create_order(self):
        response = self.client.post('/orders/', {
            'branch_id': 1,
            'location_id': 5,
            'items': ORDER_ITEMS,
            'tip_amount': 10,
            'special_instruction': 'No onions',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        self.assertEqual(response.json()['order_number'], 'ORD-99')
        self.assertEqual(response.json()['totals']['total_amount'], 83.19)

        sent = self.api.sent('POST', '/api/orders')[0]['json']
        self.assertEqual(sent['branchId'], 1)
        self.assertEqual(sent['locationId'], 5)
        self.assertEqual(sent['username'], 'admin@test.com')
        self.assertEqual(sent['orderType'], 3)
        self.assertEqual(sent['deviceInfo'], 'POS-Web')
        self.assertEqual(sent['tipAmount'], 10.0)
        self.assertEqual(sent['specialInstruction'], 'No onions')
        self.assertEqual(sent['orderItems'], [
            {
                'menuItemId': 1,
                'variantId': 11,
                'quantity': 2,
                'modifiers': [{'modifierId': 21, 'quantity': 2}],
                'customizations': [{'customizationId': 31, 'optionId': 311}],
            },
            {'menuItemId': 4, 'variantId': 0, 'quantity': 3, 'modifiers': [], 'customizations': []},
        ])
        self.assertEqual(sent['orderPackages'], [{'menuPackageId': 7, 'quantity': 1}])

    def test_create_order_refreshes_order_list(self):
        self.client.get('/orders/', {'branch_id': 1})
        self.client.get('/orders/', {'branch_id': 1})
        self.assertEqual(len(self.api.sent('GET', '/api/Order/ByBranch')), 1)

        self.client.post('/orders/', {'branch_id': 1, 'items': ORDER_ITEMS}, format='json')

        self.client.get('/orders/', {'branch_id': 1})
        self.assertEqual(len(self.api.sent('GET', '/api/Order/ByBranch')), 2)

    def test_empty_order_is_rejected(self):
        response = self.client.post('/orders/', {'branch_id': 1, 'items': []}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self.api.sent('POST', '/api/orders'), [])

    def test_remote_rejection_is_passed_through(self):
        self.api.routes[('POST', '/api/orders')] = [
            (422, {'errors': {'Validation Error': ['Location is closed', 'Try again later']}}),
        ]
        response = self.client.post('/orders/', {'branch_id': 1, 'items': ORDER_ITEMS}, format='json')
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()['error'], 'Location is closed. Try again later')

    def test_update_status(self):
        self.api.add('PUT', '/api/Order', 200, {'orderId': 99, 'orderStatus': 'Ready'})
        response = self.client.put('/orders/status/', {'order_id': 99, 'status': 3}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.api.sent('PUT', '/api/Order')[0]['json'], {'orderId': 99, 'status': 3, 'comments': 'No'})


class MenuTests(BaseTestCase):

    def test_menu_item_needs_a_priced_variation(self):
        response = self.client.post('/menu/menu-items/', {
            'branch_id': 1,
            'name': 'Wrap',
            'menuCategoryId': 2,
            'variations': [{'name': 'Regular', 'price': -1}],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self.api.requests[1:], [])

    def test_create_menu_item(self):
        self.api.add('POST', '/api/MenuItem', 201, {'id': 8})
        response = self.client.post('/menu/menu-items/', {
            'branch_id': 1,
            'name': 'Wrap',
            'menuCategoryId': 2,
            'variations': [{'name': 'Regular', 'price': 6}],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(self.api.sent('POST', '/api/MenuItem')[0]['json']['branchId'], 1)

    def test_bulk_discount(self):
        self.api.add('PUT', '/api/Deals/bulk-discount', 200, {})
        response = self.client.put('/menu/bulk-discount/', {'target': 'deals', 'discount_id': 3, 'ids': [1, 2]}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.api.sent('PUT', '/api/Deals/bulk-discount')[0]['json'], {'dealIds': [1, 2], 'discountId': 3})

        response = self.client.put('/menu/bulk-discount/', {'target': 'menu', 'discount_id': 3, 'ids': ['x']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_writes_invalidate_cached_lists(self):
        self.api.add('GET', '/api/Discount/branch/1', 200, [])
        self.api.add('DELETE', '/api/Discount/5', 204)
        self.client.get('/menu/discounts/', {'branch_id': 1})
        self.client.get('/menu/discounts/', {'branch_id': 1})
        self.client.delete('/menu/discounts/5/')
        self.client.get('/menu/discounts/', {'branch_id': 1})
        self.assertEqual(len(self.api.sent('GET', '/api/Discount/branch/1')), 2)


class BranchTests(BaseTestCase):

    def test_branches_of_an_entity(self):
        self.api.add('GET', '/api/Branch/entity/3', 200, [{'id': 1, 'name': 'Main'}])
        response = self.client.get('/branches/', {'entity_id': 3})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [{'id': 1, 'name': 'Main'}])
        self.assertEqual(self.client.get('/branches/').status_code, status.HTTP_400_BAD_REQUEST)

    def test_create_branch_with_logo(self):
        self.api.add('POST', '/api/Branch', 201, {'id': 2})
        logo = SimpleUploadedFile('logo.png', b'png-bytes', content_type='image/png')
        response = self.client.post('/branches/', {'name': 'Harbour', 'RestaurantLogo': logo}, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        sent = self.api.sent('POST', '/api/Branch')[0]
        self.assertEqual(sent['data'], {'name': 'Harbour'})
        self.assertEqual(sent['files'], {'RestaurantLogo': ('logo.png', b'png-bytes', 'image/png')})


class BranchConfigurationTests(BaseTestCase):

    def test_percentages_must_be_in_range(self):
        response = self.client.put('/branches/1/configuration/', {'taxPercentage': 150}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self.api.sent('PUT', '/api/Branch/1/configuration'), [])

    def test_update_refreshes_cached_configuration(self):
        self.api.add('GET', '/api/Branch/1/configuration', 200, CONFIGURATION)
        self.api.add('PUT', '/api/Branch/1/configuration', 200, {**CONFIGURATION, 'taxPercentage': 16})
        self.client.get('/branches/1/configuration/')
        self.client.put('/branches/1/configuration/', {**CONFIGURATION, 'taxPercentage': 16}, format='json')
        self.client.get('/branches/1/configuration/')
        self.assertEqual(len(self.api.sent('GET', '/api/Branch/1/configuration')), 2)


class InventoryTests(BaseTestCase):

    def test_categories_take_branch_in_query(self):
        self.api.add('GET', '/api/inventory/categories', 200, [])
        response = self.client.get('/inventory/categories/', {'branch_id': 1})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.api.sent('GET', '/api/inventory/categories')[0]['params']['BranchId'], '1')

    def test_receive_purchase_order(self):
        self.api.add('PUT', '/api/inventory/purchase-orders/3/receive', 200, {})
        response = self.client.put('/inventory/purchase-orders/3/receive/', {
            'items': [{'purchase_order_item_id': 10, 'received_quantity': 4}],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            self.api.sent('PUT', '/api/inventory/purchase-orders/3/receive')[0]['json'],
            {'items': [{'purchaseOrderItemId': 10, 'receivedQuantity': 4.0}]},
        )

    def test_recipe_calculator(self):
        response = self.client.post('/inventory/recipes/calculate/', {'number_of_orders': 4}, format='json')
        self.assertEqual(response.json(), {'quantity': 0.25})
        response = self.client.post('/inventory/recipes/calculate/', {
            'number_of_orders': 0,
            'previous_quantity': 0.5,
        }, format='json')
        self.assertEqual(response.json(), {'quantity': 0.5})
        response = self.client.post('/inventory/recipes/calculate/', {
            'number_of_orders': 4,
            'previous_quantity': 0.5,
            'target_selected': False,
        }, format='json')
        self.assertEqual(response.json(), {'quantity': 0.5})

    def test_recipe_calculator_with_form_fields(self):
        response = self.client.post('/inventory/recipes/calculate/', {
            'number_of_orders': '4',
            'previous_quantity': '0.5',
            'target_selected': 'false',
        }, format='multipart')
        self.assertEqual(response.json(), {'quantity': 0.5})
        response = self.client.post('/inventory/recipes/calculate/', {
            'number_of_orders': '8',
            'target_selected': 'true',
            'inventory_item_selected': 'on',
        }, format='multipart')
        self.assertEqual(response.json(), {'quantity': 0.125})

    def test_recipe_targets_are_exclusive(self):
        response = self.client.post('/inventory/recipes/', {
            'branch_id': 1,
            'menuItemId': 2,
            'variantId': 3,
            'subMenuItemId': 9,
            'items': [{'inventoryItemId': 5, 'quantity': 0.25, 'unit': 'kg'}],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self.api.sent('POST', '/api/inventory/recipes'), [])

    def test_create_recipe(self):
        self.api.add('POST', '/api/inventory/recipes', 201, {'id': 12})
        response = self.client.post('/inventory/recipes/', {
            'branch_id': 1,
            'subMenuItemId': 9,
            'items': [{'inventoryItemId': 5, 'quantity': 0.33333, 'unit': 'kg'}],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(self.api.sent('POST', '/api/inventory/recipes')[0]['json'], {
            'branchId': 1,
            'subMenuItemId': 9,
            'items': [{'inventoryItemId': 5, 'quantity': 0.333, 'unit': 'kg'}],
        })


class ReservationTests(BaseTestCase):

    def test_reservation_action(self):
        self.api.add('PUT', '/api/Reservations/5/action', 200, None)
        response = self.client.put('/reservations/5/action/', {'action_taken': 1, 'remarks': 'VIP'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.api.sent('PUT', '/api/Reservations/5/action')[0]['json'],
                         {'actionTaken': 1, 'remarks': 'VIP'})

        response = self.client.put('/reservations/5/action/', {'action_taken': 7}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_guest_limit(self):
        response = self.client.post('/reservations/', {
            'branch_id': 1,
            'reservationName': 'Khan',
            'reservationDate': '2026-01-01T19:00:00',
            'tableId': 3,
            'numberOfGuests': 51,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_list_sorts_by_name_ascending(self):
        self.api.add('GET', '/api/Reservations/branch/1', 200, [])
        self.client.get('/reservations/', {'branch_id': 1})
        params = self.api.sent('GET', '/api/Reservations/branch/1')[0]['params']
        self.assertEqual(params['SortBy'], 'name')
        self.assertEqual(params['IsAscending'], 'true')


class StockTests(BaseTestCase):

    def test_stock_list(self):
        self.api.add('GET', '/api/inventory/branch/1/stock', 200, {'items': [], 'totalCount': 0})
        response = self.client.get('/inventory/stock/', {'branch_id': 1, 'search': 'flour'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        params = self.api.sent('GET', '/api/inventory/branch/1/stock')[0]['params']
        self.assertEqual(params['SearchTerm'], 'flour')
        self.assertEqual(params['SortBy'], 'itemName')

    def test_stock_update_refreshes_low_stock(self):
        self.api.add('GET', '/api/inventory/branch/1/low-stock', 200, [])
        self.api.add('POST', '/api/inventory/branch/1/stock/update', 200, {'currentStock': 12})
        self.client.get('/inventory/low-stock/', {'branch_id': 1})
        self.client.get('/inventory/low-stock/', {'branch_id': 1})

        response = self.client.post('/inventory/stock/', {
            'branch_id': 1,
            'inventory_item_id': 5,
            'new_stock': '12',
            'reason': 'Stock count correction',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.content)
        self.assertEqual(self.api.sent('POST', '/api/inventory/branch/1/stock/update')[0]['json'],
                         {'inventoryItemId': 5, 'newStock': 12.0, 'reason': 'Stock count correction'})

        self.client.get('/inventory/low-stock/', {'branch_id': 1})
        self.assertEqual(len(self.api.sent('GET', '/api/inventory/branch/1/low-stock')), 2)

    def test_stock_update_validation(self):
        for body in ({'inventory_item_id': 5, 'new_stock': -1, 'reason': 'x'},
                     {'inventory_item_id': 5, 'new_stock': 3, 'reason': ' '},
                     {'new_stock': 3, 'reason': 'x'}):
            response = self.client.post('/inventory/stock/', {'branch_id': 1, **body}, format='json')
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, body)
        self.assertEqual(self.api.sent('POST', '/api/inventory/branch/1/stock/update'), [])

    def test_wastage_list_needs_dates(self):
        self.api.add('GET', '/api/inventory/wastage', 200, [])
        response = self.client.get('/inventory/wastage/', {'branch_id': 1})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.get('/inventory/wastage/', {'branch_id': 1, 'from': '2026-01-01', 'to': '2026-01-31'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        params = self.api.sent('GET', '/api/inventory/wastage')[0]['params']
        self.assertEqual(params['branchId'], '1')
        self.assertEqual(params['from'], '2026-01-01')
        self.assertEqual(params['to'], '2026-01-31')

    def test_record_wastage(self):
        self.api.add('POST', '/api/inventory/wastage', 201, {'id': 3})
        response = self.client.post('/inventory/wastage/', {
            'branch_id': 1, 'inventoryItemId': '5', 'quantity': '0.5', 'reason': 'Spoiled',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(self.api.sent('POST', '/api/inventory/wastage')[0]['json'],
                         {'branchId': 1, 'inventoryItemId': 5, 'quantity': 0.5, 'reason': 'Spoiled'})

        response = self.client.post('/inventory/wastage/', {
            'branch_id': 1, 'inventoryItemId': 5, 'quantity': 0, 'reason': 'Spoiled',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class UserTests(BaseTestCase):

    def test_user_list(self):
        self.api.add('GET', '/api/User/users', 200, {'items': [{'id': 4}], 'totalCount': 1})
        response = self.client.get('/users/', {'page': 2})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        params = self.api.sent('GET', '/api/User/users')[0]['params']
        self.assertEqual(params['PageNumber'], '2')
        self.assertEqual(params['SortBy'], 'name')
        self.assertEqual(params['IsAscending'], 'true')

    def test_create_user_sends_form_data(self):
        self.api.add('POST', '/api/User/user', 201, {'id': 9, 'name': 'Sara'})
        response = self.client.post('/users/', {
            'name': 'Sara',
            'email': 'sara@test.com',
            'password': 'secret1',
            'phone_number': '0300 1234567',
            'role_id': 2,
            'branch_id': 1,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        self.assertEqual(self.api.sent('POST', '/api/User/user')[0]['files'], {
            'Email': (None, 'sara@test.com'),
            'Name': (None, 'Sara'),
            'Password': (None, 'secret1'),
            'MobileNumber': (None, '0300 1234567'),
            'RoleId': (None, '2'),
            'BranchId': (None, '1'),
        })

    def test_create_user_validation(self):
        base = {'name': 'Sara', 'email': 'sara@test.com', 'password': 'secret1',
                'phone_number': '03001234567', 'role_id': 2, 'branch_id': 1}
        for override in ({'email': 'not-an-email'}, {'password': '123'}, {'phone_number': '12345'}, {'role_id': None}):
            response = self.client.post('/users/', {**base, **override}, format='json')
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, override)
        self.assertEqual(self.api.sent('POST', '/api/User/user'), [])

    def test_update_user_puts_id_in_body(self):
        self.api.add('PUT', '/api/User/user', 200, {'id': 9})
        response = self.client.put('/users/9/', {
            'name': 'Sara K', 'phone_number': '03001234567', 'role_id': 3, 'branch_id': 1,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.api.sent('PUT', '/api/User/user')[0]['json'],
                         {'id': 9, 'name': 'Sara K', 'mobileNumber': '03001234567', 'roleId': 3, 'branchId': 1})

    def test_delete_user_refreshes_list(self):
        self.api.add('GET', '/api/User/users', 200, [])
        self.api.add('DELETE', '/api/User/user/9', 204)
        self.client.get('/users/')
        response = self.client.delete('/users/9/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.client.get('/users/')
        self.assertEqual(len(self.api.sent('GET', '/api/User/users')), 2)

    def test_update_profile(self):
        self.api.add('PUT', '/api/User/profile', 200, {'name': 'Test Admin'})
        response = self.client.put('/users/profile/', {'name': 'Test Admin', 'mobile_number': '+92 300 1234567'},
                                   format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.api.sent('PUT', '/api/User/profile')[0]['files'],
                         {'Name': (None, 'Test Admin'), 'MobileNumber': (None, '+92 300 1234567')})

        response = self.client.put('/users/profile/', {'name': 'Test Admin', 'mobile_number': 'call me'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class UserBranchAccessTests(BaseTestCase):
    branch_ids = [1]

    def test_users_only_created_in_own_branches(self):
        response = self.client.post('/users/', {
            'name': 'Sara', 'email': 'sara@test.com', 'password': 'secret1',
            'phone_number': '03001234567', 'role_id': 2, 'branch_id': 2,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class PasswordResetTests(BaseTestCase):
    auto_login = False

    def test_forgot_password(self):
        self.api.add('POST', '/api/User/forgot-password', 200, {'userId': 42})
        response = self.client.post('/accounts/password/forgot/', {'email': 'admin@test.com'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        sent = self.api.sent('POST', '/api/User/forgot-password')[0]
        self.assertEqual(sent['json'], {'email': 'admin@test.com'})
        self.assertNotIn('Authorization', sent['headers'])

    def test_reset_password(self):
        self.api.add('POST', '/api/User/reset-password', 200, None)
        response = self.client.post('/accounts/password/reset/', {
            'email': 'admin@test.com',
            'otp': '123456',
            'password': 'new-secret',
            'confirm_password': 'new-secret',
            'user_id': 42,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.api.sent('POST', '/api/User/reset-password')[0]['json'], {
            'email': 'admin@test.com',
            'password': 'new-secret',
            'otp': '123456',
            'userId': 42,
            'otpType': 1,
        })

    def test_reset_password_validation(self):
        base = {'email': 'admin@test.com', 'otp': '123456', 'password': 'new-secret', 'confirm_password': 'new-secret'}
        for override in ({'otp': ''}, {'password': 'abc', 'confirm_password': 'abc'}, {'confirm_password': 'other-secret'}):
            response = self.client.post('/accounts/password/reset/', {**base, **override}, format='json')
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, override)
        self.assertEqual(self.api.sent('POST', '/api/User/reset-password'), [])


class EntityTests(BaseTestCase):

    def test_entity_list(self):
        self.api.add('GET', '/api/Entity', 200, [{'id': 3, 'name': 'Harbour Group', 'type': 2}])
        response = self.client.get('/entities/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()[0]['name'], 'Harbour Group')

    def test_create_entity_with_certificate(self):
        self.api.add('POST', '/api/Entity', 201, {'id': 4})
        certificate = SimpleUploadedFile('license.pdf', b'pdf-bytes', content_type='application/pdf')
        response = self.client.post('/entities/', {
            'name': 'Seaside Hotel', 'phone': '0211234567', 'address': 'Clifton', 'type': 1,
            'CertificateFile': certificate,
        }, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        self.assertEqual(self.api.sent('POST', '/api/Entity')[0]['files'], {
            'Name': (None, 'Seaside Hotel'),
            'Phone': (None, '0211234567'),
            'Address': (None, 'Clifton'),
            'Type': (None, '1'),
            'CertificateFile': ('license.pdf', b'pdf-bytes', 'application/pdf'),
        })

    def test_entity_type_must_be_hotel_or_restaurant(self):
        response = self.client.post('/entities/', {
            'name': 'Seaside', 'phone': '0211234567', 'address': 'Clifton', 'type': 3,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_deleting_an_entity_refreshes_its_branches(self):
        self.api.add('GET', '/api/Branch/entity/3', 200, [])
        self.api.add('DELETE', '/api/Entity/3', 204)
        self.client.get('/branches/', {'entity_id': 3})
        self.client.delete('/entities/3/')
        self.client.get('/branches/', {'entity_id': 3})
        self.assertEqual(len(self.api.sent('GET', '/api/Branch/entity/3')), 2)

    def test_primary_color(self):
        self.api.add('PUT', '/api/Entity/3/primary-color', 200, {'primaryColor': '#16A34A'})
        response = self.client.put('/entities/3/primary-color/', {'primary_color': '#16a34a'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.api.sent('PUT', '/api/Entity/3/primary-color')[0]['json'], {'primaryColor': '#16A34A'})

        response = self.client.put('/entities/3/primary-color/', {'primary_color': 'green'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
