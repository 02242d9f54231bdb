"""Rules for the "other" category: normal/abnormal people and behavior, minorities."""

from text_assessment.inclusive.configuration.feedback_strings import (
    HARMFUL_NON_INCLUSIVE,
    HARMFUL_POTENTIALLY_NON_INCLUSIVE,
    POTENTIALLY_HARMFUL,
    POTENTIALLY_HARMFUL_UNLESS_ANIMALS_OBJECTS,
)
from text_assessment.inclusive.rules import annotate_rules, not_preceded_by
from text_assessment.models.rule import InclusiveLanguageRule, Score

CATEGORY = "other"
LEARN_MORE_URL = "https://yoa.st/inclusive-language-other"

# "mentally normal person" is flagged by mentallyNormal, not normalPerson.
_NOT_AFTER_MENTAL_OR_BEHAVIORAL = not_preceded_by(["mentally", "behaviorally", "behaviourally"])

_MENTAL_HEALTH_CAUTION = (
    "Be careful when using mental health descriptors and try to avoid making assumptions about "
    "someone's mental health."
)

_RULES = [
    InclusiveLanguageRule(
        identifier="minorities",
        non_inclusive_phrases=["minorities"],
        inclusive_alternatives=[
            "<i>members of the LGBTQ+ community</i>",
            "<i>Indigenous peoples</i>",
            "<i>marginalized groups</i>",
            "<i>religious minorities</i>",
        ],
        score=Score.POTENTIALLY_NON_INCLUSIVE,
        feedback_format=(
            f"{HARMFUL_POTENTIALLY_NON_INCLUSIVE} Consider using an alternative by being specific about "
            "which group(s) of people you are referring to. For example: %2$s, %3$s, %4$s. In case an "
            "alternative is not available, make sure to specify the type of minorities you are referring "
            "to, e.g., %5$s."
        ),
    ),
    InclusiveLanguageRule(
        identifier="normalPerson",
        non_inclusive_phrases=["normal person"],
        inclusive_alternatives=[
            "<i>typical person, average person</i> or describing the person's specific trait, experience, or behavior"
        ],
        score=Score.NON_INCLUSIVE,
        feedback_format=POTENTIALLY_HARMFUL,
        exception_filter=_NOT_AFTER_MENTAL_OR_BEHAVIORAL,
    ),
    InclusiveLanguageRule(
        identifier="normalPeople",
        non_inclusive_phrases=["normal people", "Normal people"],
        inclusive_alternatives=[
            "<i>typical people, average people</i> or describing people's specific trait, experience, or behavior"
        ],
        score=Score.NON_INCLUSIVE,
        feedback_format=POTENTIALLY_HARMFUL,
        case_sensitive=True,
        exception_filter=_NOT_AFTER_MENTAL_OR_BEHAVIORAL,
    ),
    InclusiveLanguageRule(
        identifier="mentallyNormal",
        non_inclusive_phrases=["mentally normal"],
        inclusive_alternatives=["<i>people without mental health conditions</i>, <i>mentally healthy people</i>"],
        score=Score.NON_INCLUSIVE,
        feedback_format=(
            f"{HARMFUL_NON_INCLUSIVE} Consider using an alternative, such as %2$s. If possible, be more "
            "specific. For example: <i>people who don’t have anxiety disorders</i>, <i>people who haven't "
            f"experienced trauma</i>, etc. {_MENTAL_HEALTH_CAUTION}"
        ),
    ),
    InclusiveLanguageRule(
        identifier="behaviorallyNormal",
        non_inclusive_phrases=["behaviorally normal", "behaviourally normal"],
        inclusive_alternatives=["<i>showing typical behavior</i> or describing the specific behavior"],
        score=Score.POTENTIALLY_NON_INCLUSIVE,
        feedback_format=POTENTIALLY_HARMFUL_UNLESS_ANIMALS_OBJECTS,
    ),
    InclusiveLanguageRule(
        identifier="abnormalPerson",
        non_inclusive_phrases=["abnormal person"],
        inclusive_alternatives=["describing the person's specific trait, experience, or behavior"],
        score=Score.NON_INCLUSIVE,
        feedback_format=POTENTIALLY_HARMFUL,
    ),
    InclusiveLanguageRule(
        identifier="abnormalPeople",
        non_inclusive_phrases=["abnormal people"],
        inclusive_alternatives=["describing people's specific trait, experience, or behavior"],
        score=Score.NON_INCLUSIVE,
        feedback_format=POTENTIALLY_HARMFUL,
    ),
    InclusiveLanguageRule(
        identifier="mentallyAbnormal",
        non_inclusive_phrases=["mentally abnormal"],
        inclusive_alternatives=[
            "<i>people with a mental health condition</i>, <i>people with mental health problems</i>"
        ],
        score=Score.NON_INCLUSIVE,
        feedback_format=(
            f"{HARMFUL_NON_INCLUSIVE} Consider using an alternative, such as %2$s. If possible, be more "
            "specific. For example: <i>people who have anxiety disorders, people who have experienced "
            f"trauma</i>, etc. {_MENTAL_HEALTH_CAUTION}"
        ),
    ),
    InclusiveLanguageRule(
        identifier="behaviorallyAbnormal",
        non_inclusive_phrases=["behaviorally abnormal", "behaviourally abnormal"],
        inclusive_alternatives=[
            "<i>showing atypical behavior, showing dysfunctional behavior</i> or describing the specific behavior"
        ],
        score=Score.POTENTIALLY_NON_INCLUSIVE,
        feedback_format=POTENTIALLY_HARMFUL_UNLESS_ANIMALS_OBJECTS,
    ),
    InclusiveLanguageRule(
        identifier="abnormalBehavior",
        non_inclusive_phrases=["abnormal behavior", "abnormal behaviour"],
        inclusive_alternatives=["<i>atypical behavior, unusual behavior</i> or describing the specific behavior"],
        score=Score.POTENTIALLY_NON_INCLUSIVE,
        feedback_format=POTENTIALLY_HARMFUL_UNLESS_ANIMALS_OBJECTS,
    ),
]

OTHER_RULES: tuple[InclusiveLanguageRule, ...] = tuple(annotate_rules(_RULES, CATEGORY, LEARN_MORE_URL))
