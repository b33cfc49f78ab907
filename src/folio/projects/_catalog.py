"""Built-in project cards."""

from ._models import Link, ProjectCard

DEFAULT_PROJECTS: tuple[ProjectCard, ...] = (
    ProjectCard(
        title="Toy Image Search Engine",
        description=(
            "Upload an image and find images containing the same object or "
            "images with a similar situation (for example: a crowd of people)"
        ),
        image_path="/projects/project1_banner.gif",
        alt_text="Project 1",
        links=(
            Link(label="View Article", url="./toy-image-search-engine"),
            Link(
                label="Github",
                url="https://github.com/ishandotsh/resnet-search-engine",
                external=True,
            ),
            Link(
                label="Live Demo",
                url="https://resnet-search-engine.herokuapp.com/",
                external=True,
            ),
        ),
    ),
    ProjectCard(
        title="Minimax Visualizer",
        description=(
            "A playable tic-tac-toe game that shows the decisions made by the "
            "minimax algorithm."
        ),
        image_path="/projects/project2_banner.png",
        alt_text="Project 2",
        links=(
            Link(
                label="Github",
                url="https://github.com/ishandotsh/minimax-visualizer",
                external=True,
            ),
            Link(
                label="Live Demo",
                url="https://minimaxttt.netlify.app/",
                external=True,
            ),
        ),
    ),
)
