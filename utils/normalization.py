import re
from typing import Iterable, Optional

from src.models.recipe import Ingredient, Step

# Единицы измерения (только английский язык), единственное и множественное число
UNIT_WORDS = frozenset({
    # объем
    'cup', 'cups', 'tablespoon', 'tablespoons', 'tbsp', 'tbsps', 'tbs',
    'teaspoon', 'teaspoons', 'tsp', 'tsps', 'ounce', 'ounces', 'oz',
    'pint', 'pints', 'quart', 'quarts', 'gallon', 'gallons',
    'milliliter', 'milliliters', 'millilitre', 'millilitres', 'ml',
    'liter', 'liters', 'litre', 'litres', 'l',
    # вес
    'pound', 'pounds', 'lb', 'lbs', 'gram', 'grams', 'g',
    'kilogram', 'kilograms', 'kg',
    # штучные и прочие
    'pinch', 'pinches', 'dash', 'dashes', 'drop', 'drops', 'slice', 'slices',
    'piece', 'pieces', 'clove', 'cloves', 'can', 'cans', 'package', 'packages',
    'bag', 'bags', 'bunch', 'bunches', 'head', 'heads', 'stalk', 'stalks',
})

FRACTION_GLYPHS = '¼½¾⅓⅔⅛⅜⅝⅞'

# Количество: цифры, точка, слеш, пробелы и дроби-символы; начинается и заканчивается цифрой или дробью
_AMOUNT_EDGE = rf'[\d{FRACTION_GLYPHS}]'
AMOUNT_PATTERN = rf'{_AMOUNT_EDGE}(?:[\d./\s{FRACTION_GLYPHS}]*{_AMOUNT_EDGE})?'

# "2 large cloves garlic, minced" -> amount, последовательность слов, остаток
MULTI_WORD_UNIT_PATTERN = re.compile(
    rf'^(?P<amount>{AMOUNT_PATTERN})\s+(?P<words>[A-Za-z]+\.?(?:\s+[A-Za-z]+\.?)*)\s+(?P<rest>.+)$',
    re.DOTALL
)
# "2 cups x" -> amount, одно слово, остаток
SINGLE_WORD_UNIT_PATTERN = re.compile(
    rf'^(?P<amount>{AMOUNT_PATTERN})\s+(?P<unit>[A-Za-z]+\.?)\s+(?P<rest>.+)$',
    re.DOTALL
)
# "2 eggs" -> amount и остаток без единицы
BARE_NUMBER_PATTERN = re.compile(
    rf'^(?P<amount>{AMOUNT_PATTERN})\s+(?P<rest>.+)$',
    re.DOTALL
)

# "1. " в начале шага; "2.5 cups" не трогаем, иначе повторная нормализация шага съест число
STEP_NUMBER_PREFIX = re.compile(r'^\d+\.(?!\d)\s*')
# "Step 2:" в начале шага
STEP_LABEL_PREFIX = re.compile(r'^step\s*\d+\s*:\s*', re.IGNORECASE)


def _is_unit(word: str) -> bool:
    # "tbsp." и "oz." - сокращения с точкой
    return word.lower().rstrip('.') in UNIT_WORDS


def _parse_multi_word_unit(line: str) -> Optional[Ingredient]:
    match = MULTI_WORD_UNIT_PATTERN.match(line)
    if not match:
        return None

    tokens = match.group('words').split()
    for i, token in enumerate(tokens):
        if not _is_unit(token):
            continue
        # первое слово из словаря выигрывает, слова после него уходят в название
        amount = match.group('amount').strip()
        unit = ' '.join(tokens[:i + 1])
        name = ' '.join(tokens[i + 1:] + [match.group('rest').strip()]).strip()
        if amount and name and len(name) > 1:
            return Ingredient(amount=amount, unit=unit, name=name)
        return None

    return None


def _parse_single_word_unit(line: str) -> Optional[Ingredient]:
    match = SINGLE_WORD_UNIT_PATTERN.match(line)
    if not match or not _is_unit(match.group('unit')):
        return None

    amount = match.group('amount').strip()
    name = match.group('rest').strip()
    if not amount or not name:
        return None
    return Ingredient(amount=amount, unit=match.group('unit'), name=name)


def _parse_bare_number(line: str) -> Optional[Ingredient]:
    match = BARE_NUMBER_PATTERN.match(line)
    if not match:
        return None

    amount = match.group('amount').strip()
    name = match.group('rest').strip()
    if not amount or not name:
        return None
    return Ingredient(amount=amount, unit='', name=name)


def normalize_ingredient(line: str) -> Optional[Ingredient]:
    """
    Parses a raw ingredient line into amount, unit and name.

    Rules are tried in order, the first match wins:
    multi-word unit, single-word unit, bare number, whole line as name.
    Amount and unit are kept verbatim (no arithmetic, no canonical unit names).

    Examples:
        "2 cups flour" -> Ingredient(amount="2", unit="cups", name="flour")
        "1/2 tsp salt" -> Ingredient(amount="1/2", unit="tsp", name="salt")
        "2 eggs" -> Ingredient(amount="2", unit="", name="eggs")
        "a pinch of salt to taste" -> Ingredient(amount="", unit="", name="a pinch of salt to taste")

    Returns:
        Ingredient или None для пустой строки
    """
    if not line:
        return None
    text = line.strip()
    if not text:
        return None

    for parse in (_parse_multi_word_unit, _parse_single_word_unit, _parse_bare_number):
        ingredient = parse(text)
        if ingredient is not None:
            return ingredient

    return Ingredient(amount='', unit='', name=text)


def normalize_ingredients_list(lines: Iterable[str]) -> list[Ingredient]:
    """
    Нормализует список строк ингредиентов, пустые строки пропускаются.
    """
    if not lines:
        return []
    return [ing for line in lines if (ing := normalize_ingredient(line)) is not None]


def normalize_step(line: str) -> Optional[Step]:
    """
    Убирает нумерацию вида "1." и "Step 2:" в начале шага

    Returns:
        Step или None, если после очистки ничего не осталось
    """
    if not line:
        return None
    text = STEP_NUMBER_PREFIX.sub('', line.strip(), count=1)
    text = STEP_LABEL_PREFIX.sub('', text, count=1).strip()
    if not text:
        return None
    return Step(text=text)


def normalize_steps(lines: Iterable[str]) -> list[Step]:
    """Нормализует шаги, сохраняя порядок"""
    if not lines:
        return []
    return [step for line in lines if (step := normalize_step(line)) is not None]
