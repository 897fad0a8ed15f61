import unittest
from bulkbasket.logic.shopping.normalizer import normalize_ingredient_name


class TestNormalizeIngredientName(unittest.TestCase):

    def test_quantity_unit_and_descriptors_removed(self):
        self.assertEqual(normalize_ingredient_name("2 cups fresh chopped spinach"), "spinach")

    def test_lowercase_and_whitespace(self):
        self.assertEqual(normalize_ingredient_name("  Olive   Oil  "), "olive oil")
        self.assertEqual(normalize_ingredient_name("Fresh Basil"), "basil")

    def test_fractions_and_ranges(self):
        self.assertEqual(normalize_ingredient_name("1/2 cup dried oregano"), "oregano")
        self.assertEqual(normalize_ingredient_name("1-2 cloves garlic"), "garlic")
        self.assertEqual(normalize_ingredient_name("½ tsp paprika"), "paprika")
        self.assertEqual(normalize_ingredient_name("1.5 lbs chicken thigh"), "chicken thigh")

    def test_glued_metric_unit(self):
        self.assertEqual(normalize_ingredient_name("200g ground beef"), "ground beef")

    def test_size_words_and_of(self):
        self.assertEqual(normalize_ingredient_name("3 large eggs"), "eggs")
        self.assertEqual(normalize_ingredient_name("2 cups of rice"), "rice")

    def test_quantity_without_unit_keeps_name(self):
        self.assertEqual(normalize_ingredient_name("2 eggs"), "eggs")

    def test_measure_words_kept_without_quantity(self):
        self.assertEqual(normalize_ingredient_name("large carrot"), "large carrot")

    def test_preparation_notes_dropped(self):
        self.assertEqual(normalize_ingredient_name("1 large onion, diced"), "onion")
        self.assertEqual(normalize_ingredient_name("diced tomatoes (canned)"), "tomatoes")
        self.assertEqual(normalize_ingredient_name("Salt to taste"), "salt")

    def test_descriptors_match_whole_words_only(self):
        self.assertEqual(normalize_ingredient_name("freshly ground pepper"), "freshly ground pepper")
        self.assertEqual(normalize_ingredient_name("organic sliced mushroom"), "mushroom")

    def test_only_descriptors_gives_empty(self):
        self.assertEqual(normalize_ingredient_name("Fresh, chopped"), "")
        self.assertEqual(normalize_ingredient_name("fresh chopped"), "")
        self.assertEqual(normalize_ingredient_name(""), "")
