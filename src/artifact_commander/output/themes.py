"""Classifier and node color maps."""

from artifact_commander.models import Classifier, NodeType

CLASSIFIER_COLORS: dict[Classifier, str] = {
    Classifier.RELEASE: "green",
    Classifier.SNAPSHOT: "yellow",
}

NODE_STYLES: dict[NodeType, tuple[str, str]] = {
    NodeType.DIRECTORY: ("bold blue", "[D]"),
    NodeType.FILE: ("white", "[F]"),
}


def styled_classifier(classifier: Classifier) -> str:
    color = CLASSIFIER_COLORS.get(classifier, "white")
    return f"[{color}]{classifier.value.upper()}[/{color}]"


def styled_node(node_type: NodeType, name: str) -> str:
    style, icon = NODE_STYLES.get(node_type, ("white", "[?]"))
    suffix = "/" if node_type is NodeType.DIRECTORY else ""
    return f"[{style}]{icon} {name}{suffix}[/{style}]"
