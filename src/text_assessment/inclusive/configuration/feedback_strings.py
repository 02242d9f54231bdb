"""
Feedback templates. Placeholders: %1$s is the flagged phrase, %2$s onwards the
inclusive alternatives in order. The markup is passed through to the caller.
"""

POTENTIALLY_HARMFUL = (
    "Avoid using <i>%1$s</i> as it is potentially harmful. Consider using an alternative, such as %2$s."
)
POTENTIALLY_HARMFUL_UNLESS_ANIMALS_OBJECTS = (
    "Be careful when using <i>%1$s</i> as it is potentially harmful. Unless you are referring to objects "
    "or animals, consider using an alternative, such as %2$s."
)
HARMFUL_NON_INCLUSIVE = "Avoid using <i>%1$s</i> as it is potentially harmful."
HARMFUL_POTENTIALLY_NON_INCLUSIVE = "Be careful when using <i>%1$s</i> as it is potentially harmful."
