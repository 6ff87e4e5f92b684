"""Sample catalog loaded at startup when ``seed_sample_data`` is enabled."""

from article_catalog.domain.entities import ArticleInput

SAMPLE_ARTICLES: tuple[ArticleInput, ...] = (
    ArticleInput(
        article_number=100291,
        name="e-Cargo bike hub speed 10x",
        article_category="Hub",
        bicycle_category="e-Cargo bike",
        material="Aluminium",
        length_in_mm=110,
        width_in_mm=100,
        height_in_mm=20,
        net_weight_in_gramm=210,
    ),
    ArticleInput(
        article_number=100292,
        name="Road hub flex",
        article_category="Hub",
        bicycle_category="Road",
        material="Steel",
        length_in_mm=100,
        width_in_mm=90,
        height_in_mm=20,
        net_weight_in_gramm=300,
    ),
    ArticleInput(
        article_number=100293,
        name="Gravel hub speed pro",
        article_category="Hub",
        bicycle_category="Gravel, e-Gravel",
        material="Alloy",
        length_in_mm=90,
        width_in_mm=80,
        height_in_mm=30,
        net_weight_in_gramm=120,
    ),
    ArticleInput(
        article_number=100294,
        name="e-Trekking hub speed flex",
        article_category="Hub",
        bicycle_category="e-Trekking",
        material="Carbon",
        length_in_mm=130,
        width_in_mm=80,
        height_in_mm=20,
        net_weight_in_gramm=200,
    ),
    ArticleInput(
        article_number=100295,
        name="e-City cranks vario",
        article_category="Crank arm",
        bicycle_category="e-City, e-Trekking",
        material="Aluminium",
        length_in_mm=170,
        width_in_mm=10,
        height_in_mm=30,
        net_weight_in_gramm=100,
    ),
    ArticleInput(
        article_number=100296,
        name="Road cranks vario 4",
        article_category="Crank arm",
        bicycle_category="Road",
        material="Alloy",
        length_in_mm=200,
        width_in_mm=15,
        height_in_mm=20,
        net_weight_in_gramm=110,
    ),
    ArticleInput(
        article_number=100297,
        name="Fold crank 5",
        article_category="Crank arm",
        bicycle_category="Foldable",
        material="Nickel",
        length_in_mm=150,
        width_in_mm=10,
        height_in_mm=20,
        net_weight_in_gramm=350,
    ),
)
