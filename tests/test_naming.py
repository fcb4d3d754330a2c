import unittest

from concurrent.futures import ThreadPoolExecutor

from atmfjstc.lib.multi_values.naming import fresh_name


class FreshNameTest(unittest.TestCase):
    def test_unique(self):
        names = [fresh_name('x') for _ in range(1000)]

        self.assertEqual(len(set(names)), len(names))

    def test_hint(self):
        self.assertTrue(fresh_name('quotient').startswith('#quotient:'))

    def test_no_hint(self):
        self.assertTrue(fresh_name().startswith('#:'))

    def test_not_an_identifier(self):
        self.assertFalse(fresh_name('x').isidentifier())

    def test_unique_across_threads(self):
        with ThreadPoolExecutor(max_workers=8) as executor:
            names = list(executor.map(lambda _: fresh_name('t'), range(2000)))

        self.assertEqual(len(set(names)), len(names))
