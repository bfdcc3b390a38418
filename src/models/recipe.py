from __future__ import annotations

from typing import Literal, Optional
from pydantic import BaseModel, Field


class IntermediateRecipe(BaseModel):
    """Результат экстрактора до нормализации: сырые строки ингредиентов и шагов"""
    name: str = ""
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    image: Optional[str] = None

    # Meta (только из JSON-LD)
    servings: Optional[str] = None
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    total_time: Optional[str] = None

    def is_usable(self) -> bool:
        """Рецепт пригоден, только если есть название, ингредиенты и шаги"""
        return bool(self.name and self.name.strip() and self.ingredients and self.instructions)


class Ingredient(BaseModel):
    """Ингредиент после разбора строки: количество, единица и название"""
    amount: str = ""
    unit: str = ""
    name: str

    def as_line(self) -> str:
        """Собирает ингредиент обратно в одну строку"""
        return " ".join(part for part in (self.amount, self.unit, self.name) if part)


class Step(BaseModel):
    """Шаг приготовления без нумерации"""
    text: str


class RecipeSource(BaseModel):
    """Происхождение рецепта"""
    type: Literal['manual', 'scraped'] = 'scraped'
    url: Optional[str] = None


class ScrapedRecipe(BaseModel):
    """Итоговый рецепт, который передается в хранилище"""
    title: str
    ingredients: list[Ingredient]
    steps: list[Step]
    image_url: Optional[str] = None

    servings: Optional[str] = None
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    total_time: Optional[str] = None

    source: Optional[RecipeSource] = None

    def to_json(self) -> dict:
        """Преобразование модели в JSON-совместимый словарь"""
        return self.model_dump(mode='json', exclude_none=True)

    def to_record(self) -> dict:
        """
        Запись для хранилища рецептов

        Returns:
            Словарь вида {title, ingredients: [{name, amount, unit}], steps: [str], imageUrl, source}
        """
        source = self.source or RecipeSource()
        record = {
            "title": self.title,
            "ingredients": [
                {"name": ing.name, "amount": ing.amount, "unit": ing.unit}
                for ing in self.ingredients
            ],
            "steps": [step.text for step in self.steps],
            "source": source.model_dump(exclude_none=True),
        }
        if self.image_url:
            record["imageUrl"] = self.image_url
        for field, key in (('servings', 'servings'), ('prep_time', 'prepTime'),
                           ('cook_time', 'cookTime'), ('total_time', 'totalTime')):
            value = getattr(self, field)
            if value:
                record[key] = value
        return record
