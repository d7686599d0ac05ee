ALL_CATEGORIES = 'all'


def effective_categories(item):
    """
    Returns the category tags of a stage/document as a list.
    An empty list means the item applies to every category.
    """
    categories = item.get('categories')
    if not categories or categories == ALL_CATEGORIES:
        return []
    if isinstance(categories, str):
        return [categories]
    return list(categories)


def is_visible(item, category):
    categories = effective_categories(item)
    return not categories or category in categories


def visible_stages(stages, category):
    """
    Projection of the canonical conditional-stage list for one category.
    The canonical order is kept; the input list is never touched.
    """
    return [stage for stage in stages if is_visible(stage, category)]


def visible_documents(documents, category):
    """Same projection rule as the stages, applied to document types."""
    return [doc for doc in documents if is_visible(doc, category)]


def clean_categories(value):
    """
    Normalises a category tag value to a list of labels. Accepts a list,
    a comma separated string ("Business,Work") or None.
    """
    if value is None or value == ALL_CATEGORIES:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(',') if part.strip()]
    if isinstance(value, (list, tuple)):
        return [str(part).strip() for part in value if str(part).strip()]
    raise ValueError(f"Invalid categories: {value!r}")
