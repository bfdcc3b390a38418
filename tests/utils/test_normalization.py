import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from utils.normalization import (
    normalize_ingredient, normalize_ingredients_list, normalize_step, normalize_steps
)


class TestNormalizeIngredient(unittest.TestCase):
    """Тесты для разбора строк ингредиентов"""

    def assertIngredient(self, line, amount, unit, name):
        result = normalize_ingredient(line)
        self.assertIsNotNone(result)
        self.assertEqual((result.amount, result.unit, result.name), (amount, unit, name))

    def test_amount_unit_and_name(self):
        """Тест: число, единица и название"""
        self.assertIngredient("2 cups flour", "2", "cups", "flour")

    def test_simple_fraction(self):
        """Тест: простая дробь 1/2"""
        self.assertIngredient("1/2 tsp salt", "1/2", "tsp", "salt")

    def test_bare_number_without_unit(self):
        """Тест: число без единицы"""
        self.assertIngredient("2 eggs", "2", "", "eggs")

    def test_no_leading_amount_falls_back_to_name(self):
        """Тест: без количества вся строка становится названием"""
        self.assertIngredient("a pinch of salt to taste", "", "", "a pinch of salt to taste")

    def test_mixed_fraction_kept_verbatim(self):
        """Тест: смешанная дробь сохраняется как есть"""
        self.assertIngredient("1 1/2 cups butter", "1 1/2", "cups", "butter")

    def test_decimal_amount(self):
        """Тест: десятичное число"""
        self.assertIngredient("1.5 kg potatoes", "1.5", "kg", "potatoes")

    def test_unicode_fraction_glyph(self):
        """Тест: дробь символом"""
        self.assertIngredient("½ cup sugar", "½", "cup", "sugar")
        self.assertIngredient("1¼ cups milk", "1¼", "cups", "milk")

    def test_unit_not_canonicalized(self):
        """Тест: единица не приводится к полной форме и сохраняет регистр"""
        self.assertIngredient("3 Tbsp olive oil", "3", "Tbsp", "olive oil")

    def test_abbreviated_unit_with_dot(self):
        """Тест: сокращение единицы с точкой сохраняется как есть"""
        self.assertIngredient("2 tbsp. sugar", "2", "tbsp.", "sugar")
        self.assertIngredient("8 oz. cream cheese", "8", "oz.", "cream cheese")

    def test_words_after_unit_go_to_name(self):
        """Тест: слова после единицы становятся частью названия"""
        self.assertIngredient("2 cups all purpose flour", "2", "cups", "all purpose flour")

    def test_words_before_unit_join_unit(self):
        """Тест: слова до единицы входят в единицу (первое совпадение со словарем)"""
        self.assertIngredient("2 large cloves garlic, minced", "2", "large cloves", "garlic, minced")
        self.assertIngredient("8 fluid ounces milk", "8", "fluid ounces", "milk")

    def test_adjective_without_unit_is_bare_number(self):
        """Тест: прилагательное без единицы - разбор по числу"""
        self.assertIngredient("2 large eggs", "2", "", "large eggs")

    def test_single_char_name_uses_single_word_rule(self):
        """Тест: название из одного символа не проходит первое правило, но проходит второе"""
        self.assertIngredient("2 cups x", "2", "cups", "x")

    def test_parenthesized_size(self):
        """Тест: скобки после единицы остаются в названии"""
        self.assertIngredient("1 can (14 oz) diced tomatoes", "1", "can", "(14 oz) diced tomatoes")

    def test_amount_glued_to_unit_falls_back(self):
        """Тест: число без пробела перед единицей не разбирается"""
        self.assertIngredient("500g flour", "", "", "500g flour")

    def test_whitespace_trimmed(self):
        """Тест: пробелы по краям убираются"""
        self.assertIngredient("   salt  ", "", "", "salt")

    def test_empty_line(self):
        """Тест: пустая строка"""
        self.assertIsNone(normalize_ingredient(""))
        self.assertIsNone(normalize_ingredient("   "))

    def test_no_text_dropped(self):
        """Тест: количество, единица и название восстанавливают исходную строку"""
        for line in ["2 cups all purpose flour", "1/2 tsp salt", "2 eggs", "3 large cloves garlic"]:
            result = normalize_ingredient(line)
            self.assertEqual(result.as_line().split(), line.split())

    def test_idempotent_on_name(self):
        """Тест: повторная нормализация названия не портит его"""
        for line in ["2 cups flour", "2 eggs", "a pinch of salt to taste"]:
            first = normalize_ingredient(line)
            second = normalize_ingredient(first.name)
            self.assertEqual(second.name, first.name)
            self.assertEqual(second.amount, "")

    def test_deterministic(self):
        """Тест: одинаковый ввод - одинаковый результат"""
        self.assertEqual(normalize_ingredient("2 cups flour"), normalize_ingredient("2 cups flour"))


class TestNormalizeIngredientsList(unittest.TestCase):
    """Тесты для нормализации списка ингредиентов"""

    def test_order_preserved_and_empty_skipped(self):
        result = normalize_ingredients_list(["2 cups flour", "", "2 eggs"])
        self.assertEqual([i.name for i in result], ["flour", "eggs"])

    def test_empty_list(self):
        self.assertEqual(normalize_ingredients_list([]), [])


class TestNormalizeStep(unittest.TestCase):
    """Тесты для очистки шагов"""

    def test_number_prefix(self):
        """Тест: префикс "1." """
        self.assertEqual(normalize_step("1. Mix flour and sugar").text, "Mix flour and sugar")

    def test_number_prefix_without_space(self):
        self.assertEqual(normalize_step("12.Whisk the eggs").text, "Whisk the eggs")

    def test_step_label(self):
        """Тест: префикс "Step 2:" """
        self.assertEqual(normalize_step("Step 2: Bake at 350").text, "Bake at 350")
        self.assertEqual(normalize_step("STEP 3:Serve warm").text, "Serve warm")

    def test_decimal_is_not_enumeration(self):
        """Тест: десятичное число в начале шага не считается нумерацией"""
        self.assertEqual(normalize_step("2.5 cups of water go in first").text, "2.5 cups of water go in first")

    def test_empty_dropped(self):
        """Тест: пустые шаги отбрасываются"""
        self.assertIsNone(normalize_step(""))
        self.assertIsNone(normalize_step("   "))
        self.assertIsNone(normalize_step("3."))

    def test_idempotent(self):
        """Тест: повторная очистка не меняет текст"""
        first = normalize_step("1. Mix flour and sugar")
        self.assertEqual(normalize_step(first.text).text, first.text)

    def test_steps_order_preserved(self):
        steps = normalize_steps(["1. Mix", "", "2. Bake", "Step 3: Serve"])
        self.assertEqual([s.text for s in steps], ["Mix", "Bake", "Serve"])


if __name__ == '__main__':
    unittest.main()
