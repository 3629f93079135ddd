"""The scaled dot-product visualisation: its state, assets and frame rendering."""

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from .feature_object import FeatureObject
from .matrix_object import MatrixObject
from .operations import MatVecMul
from .sprite_renderer import ortho

KEY_COUNT = 1024


class AnimationState(Enum):
    ACTIVE = auto()
    MENU = auto()
    DONE = auto()


@dataclass(frozen=True)
class AnimationAssets:
    """Files the animation loads when it is initialised."""

    vertex_shader: Path = Path("src/shaders/sprite.vs")
    fragment_shader: Path = Path("src/shaders/sprite.frag")
    face_texture: Path = Path("src/textures/orange.png")
    block_texture: Path = Path("src/textures/block.png")


class Animation:
    """Holds the objects being visualised and renders one frame at a time."""

    def __init__(self, width, height, assets=None):
        self.state = AnimationState.ACTIVE
        self.keys = [False] * KEY_COUNT
        self.width = width
        self.height = height
        self.beep = 90.0
        self.elapsed = 0.0
        self.features: list = []
        self.embeddings: list = []
        self.assets = assets if assets is not None else AnimationAssets()

    def init(self, resources) -> None:
        """Load shaders and textures into ``resources`` and build the objects."""
        shader = resources.load_shader(
            self.assets.vertex_shader, self.assets.fragment_shader, None, "sprite"
        )
        projection = ortho(0.0, float(self.width), float(self.height), 0.0, -1.0, 1.0)
        shader.use().set_integer("image", 0)
        shader.set_matrix4("projection", projection)
        resources.load_texture(self.assets.face_texture, True, "face")
        resources.load_texture(self.assets.block_texture, True, "block")

        feature = FeatureObject()
        feature.load(10, self.width, self.height // 2, resources)
        self.features.append(feature)

        matrix = MatrixObject()
        matrix.load(5, 10, self.width, self.height // 2, resources)
        self.embeddings.append(matrix)

    def process_input(self, dt) -> tuple:
        """Return the codes of the keys currently held; none of them changes the scene."""
        return tuple(code for code, held in enumerate(self.keys) if held)

    def update(self, dt) -> None:
        """Accumulate elapsed time; the fade itself advances per rendered frame."""
        self.elapsed += dt

    def render(self, renderer) -> None:
        """Draw the matrix-vector product and advance the fade angle."""
        if not self.embeddings or not self.features:
            raise RuntimeError("the animation has not been initialised")
        MatVecMul(self.embeddings[0], self.features[0]).draw(renderer)
        if self.beep > 180:
            self.beep = 0.0
        self.beep += 0.2