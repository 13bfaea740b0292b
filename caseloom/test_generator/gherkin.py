"""Given/When/Then behavior scripts."""


def build_behavior_script(scenario: str, feature: str, given: str, then: str) -> str:
    """Render a single-scenario Gherkin feature.

    Args:
        scenario: Scenario label, e.g. ``Valid scenario``.
        feature: Feature name.
        given: Precondition phrase completing "Given user has ...".
        then: Outcome phrase completing "Then system should ...".
    """
    return (
        f"Feature: {feature}\n"
        f"\n"
        f"Scenario: {scenario}\n"
        f"  Given user has {given}\n"
        f"  When user performs the action\n"
        f"  Then system should {then}"
    )
