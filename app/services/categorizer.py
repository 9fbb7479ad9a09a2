# app/services/categorizer.py
#
# Display categories for the breakdown report.
# A category is just the tidied-up description, not a fixed taxonomy.

from typing import Optional

UNCATEGORIZED = "Uncategorized"


def categorize(description: Optional[str]) -> str:
    """
    Turn a free-text description into its display category.

    - empty / whitespace-only / None -> "Uncategorized"
    - otherwise: strip surrounding whitespace and uppercase the first
      character only (" groceries" and "Groceries" share a category,
      "groceries store" and "groceries Store" do not)
    """
    if description is None:
        return UNCATEGORIZED

    text = str(description).strip()
    if not text:
        return UNCATEGORIZED

    return text[0].upper() + text[1:]
