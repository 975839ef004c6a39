import unittest
from fastapi.testclient import TestClient
from winewithpete.api.api_run import app


def _as(user_id):
    return {"X-Member-Id": user_id}


class TestPackagesAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_list_packages_anonymous_sees_published(self):
        resp = self.client.get('/api/packages')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertFalse(data['member'])
        self.assertEqual([p['slug'] for p in data['data']], ['open-fire-sunday-supper', 'salon-dinner'])
        self.assertEqual(data['data'][1]['required_tier'], 'premium')

    def test_list_packages_member_sees_all(self):
        data = self.client.get('/api/packages', headers=_as('user-free')).json()
        self.assertTrue(data['member'])
        self.assertEqual(len(data['data']), 3)

    def test_unknown_member_id_is_anonymous(self):
        data = self.client.get('/api/packages', headers=_as('nobody')).json()
        self.assertFalse(data['member'])

    def test_package_not_found(self):
        resp = self.client.get('/api/packages/does-not-exist')
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()['detail'], 'Package not found')

    def test_unpublished_package_members_only(self):
        resp = self.client.get('/api/packages/winter-feast')
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()['detail'], 'This package is members only')
        self.assertEqual(self.client.get('/api/packages/winter-feast', headers=_as('user-founder')).status_code, 200)

    def test_package_detail_anonymous(self):
        data = self.client.get('/api/packages/open-fire-sunday-supper').json()
        self.assertEqual(data['available_serving_sizes'], [])
        self.assertFalse(data['data']['can_access'])
        self.assertNotIn('recipe', data['data']['recipes'][0])

    def test_package_detail_founder(self):
        data = self.client.get('/api/packages/salon-dinner', headers=_as('user-founder')).json()
        self.assertEqual(data['available_serving_sizes'], [4, 8, 12])
        self.assertEqual(data['access']['max_serving_size'], 12)
        self.assertTrue(data['access']['can_access_content'])
        self.assertEqual(data['data']['recipes'][0]['recipe']['name'], 'Grill Flatbread')

    def test_shopping_list_free_member_default_size(self):
        resp = self.client.get('/api/packages/open-fire-sunday-supper/shopping-list', headers=_as('user-free'))
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['serving_size'], 4)
        items = {(i['item'], i['unit']): i for i in data['items']}
        self.assertEqual(data['count'], 7)
        self.assertEqual(items[('Olive oil', 'tbsp')]['amount'], 4.0)
        self.assertEqual(items[('Yellow onion', 'whole')]['display_amount'], '4')
        self.assertEqual(data['items'][-1]['item'], 'garlic')

    def test_shopping_list_founder_merges_across_recipes(self):
        resp = self.client.get('/api/packages/salon-dinner/shopping-list?serving_size=12', headers=_as('user-founder'))
        self.assertEqual(resp.status_code, 200)
        items = {(i['item'], i['unit']): i for i in resp.json()['items']}
        self.assertEqual(items[('Olive oil', 'tbsp')]['amount'], 15.0)
        self.assertEqual(items[('Olive oil', 'cup')]['amount'], 1.0)
        self.assertEqual(items[('Flour', 'cup')]['display_amount'], '13.5')
        self.assertEqual(items[('garlic', 'clove')]['amount'], 14.0)
        self.assertEqual(items[('garlic', 'clove')]['notes'], 'minced; smashed')

    def test_shopping_list_access_rules(self):
        # free member, intermediate package
        resp = self.client.get('/api/packages/salon-dinner/shopping-list', headers=_as('user-free'))
        self.assertEqual(resp.status_code, 403)
        # anonymous
        resp = self.client.get('/api/packages/open-fire-sunday-supper/shopping-list')
        self.assertEqual(resp.status_code, 403)
        # unrecognized tier
        resp = self.client.get('/api/packages/open-fire-sunday-supper/shopping-list', headers=_as('user-legacy'))
        self.assertEqual(resp.status_code, 403)
        # premium capped at 8
        resp = self.client.get('/api/packages/salon-dinner/shopping-list?serving_size=12', headers=_as('user-premium'))
        self.assertEqual(resp.status_code, 400)

    def test_shopping_list_skips_missing_recipe(self):
        resp = self.client.get('/api/packages/winter-feast/shopping-list?serving_size=8', headers=_as('user-premium'))
        self.assertEqual(resp.status_code, 200)
        items = {(i['item'], i['unit']): i['amount'] for i in resp.json()['items']}
        self.assertEqual(items[('Ribeye steak', 'lb')], 8.0)
        self.assertEqual(len(items), 4)

    def test_shopping_list_pdf(self):
        resp = self.client.get('/api/packages/open-fire-sunday-supper/shopping-list.pdf', headers=_as('user-free'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers['content-type'], 'application/pdf')
        self.assertTrue(resp.content.startswith(b'%PDF'))

    def test_healthz(self):
        self.assertEqual(self.client.get('/healthz').json()['status'], 'ok')


if __name__ == "__main__":
    unittest.main()
