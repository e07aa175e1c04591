"""
Builder: step-by-step construction of an immutable Product.

ProductBuilder collects fields through chainable setters; build() validates
them and returns a frozen Product. Products are not meant to be assembled
field by field anywhere else.

Example:
    ```python
    product = ProductBuilder().set_name("Laptop").set_quantity(10).build()
    str(product)  # "Product [name=Laptop, quantity=10]"
    ```
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pattern_catalog.exceptions import InvalidArgumentError
from pattern_catalog.narrator import Narrator


class Product(BaseModel):
    """
    Immutable product record.

    Attributes:
        name: Product name, may be unset
        quantity: Units in stock, never negative
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, description="Product name")
    quantity: int = Field(default=0, ge=0, description="Units in stock")

    def __str__(self) -> str:
        return f"Product [name={self.name}, quantity={self.quantity}]"


class ProductBuilder:
    def __init__(self) -> None:
        self._name: str | None = None
        self._quantity = 0

    def set_name(self, name: str) -> "ProductBuilder":
        self._name = name
        return self

    def set_quantity(self, quantity: int) -> "ProductBuilder":
        self._quantity = quantity
        return self

    def build(self) -> Product:
        """
        Create the product from the collected fields.

        Raises:
            InvalidArgumentError: If the fields fail validation
        """
        try:
            return Product(name=self._name, quantity=self._quantity)
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise InvalidArgumentError(f"Invalid product: {errors}") from e


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    product = ProductBuilder().set_name("Laptop").set_quantity(10).build()
    narrator.say(str(product))

    try:
        ProductBuilder().set_name("Phone").set_quantity(-1).build()
    except InvalidArgumentError as e:
        narrator.say(str(e))


if __name__ == "__main__":
    main()
