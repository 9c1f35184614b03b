"""Initial menu of the restaurant, loaded at application start-up."""

import json

from protean.utils.globals import current_domain

from menu.category.management import AddCategory
from menu.domain import logger
from menu.product.management import AddProduct

CATEGORIES = [
    ("promocoes", "Promoção do Dia"),
    ("especiais", "Especial Da Casa"),
    ("pratos", "Pratos Especiais"),
    ("combos", "Combos promocionais - Hambúrguer"),
    ("batatas", "Batata Frita"),
    ("tradicionais", "Hambúrguer Tradicional"),
    ("artesanais", "Hambúrguer Artesanais"),
    ("bebidas", "Bebidas"),
]

PRODUCTS = [
    {
        "name": "Batata Frita porção 400gr (in natura)",
        "description": (
            "Batata frita porção 400gr (in natura). Crocante, sequinhas, levemente salgadas, "
            "perfeita para o seu lanche."
        ),
        "price": 31.90,
        "original_price": 38.00,
        "category": "batatas",
        "serves": "4 pessoas",
        "volume": "400g",
        "is_featured": True,
        "tags": ["entrega rápida", "entrega gratis", "desconto", "promoção", "barato"],
    },
    {
        "name": "Soda Italiana - bebida",
        "description": (
            "A Soda italiana é uma bebida refrescante e leve, feita com água gaseificada, xarope aromatizado e gelo."
        ),
        "price": 12.90,
        "original_price": 15.00,
        "category": "bebidas",
        "serves": "1 pessoa",
        "volume": "300ml",
        "is_featured": True,
    },
    {
        "name": "Batata Frita + Refrigerante Lata",
        "description": (
            "Delicie-se com o nosso combo promocional que é um verdadeiro clássico: Batata Frita + "
            "Refrigerante Lata. São aproximadamente 150 gramas de batatas crocantes e douradas, fritas "
            "na medida certa, acompanhadas de um refrigerante em lata de 350ml para matar a sede."
        ),
        "price": 19.90,
        "original_price": 23.00,
        "category": "combos",
        "serves": "1 pessoa",
        "is_featured": True,
    },
    {
        "name": "Promoção Dobradinha - compre 2 X-Burguer e ganhe 2 Guaracamp natural",
        "description": (
            "Na compra de 2 X-Burguer ganhe 2 Guaracamp natural. Aproveite nossas promoções e descontos incríveis."
        ),
        "price": 32.90,
        "original_price": 38.00,
        "category": "promocoes",
        "serves": "2 pessoas",
        "is_featured": True,
        "tags": ["bebida gelada"],
    },
    {
        "name": "X-Burguer Artesanal",
        "description": (
            "Hambúrguer artesanal com blend especial, queijo, alface, tomate, cebola e molho especial da casa."
        ),
        "price": 24.90,
        "category": "artesanais",
        "serves": "1 pessoa",
    },
    {
        "name": "X-Bacon Tradicional",
        "description": "Hambúrguer tradicional com bacon crocante, queijo, alface, tomate e maionese.",
        "price": 22.90,
        "category": "tradicionais",
        "serves": "1 pessoa",
    },
    {
        "name": "Coca-Cola Lata 350ml",
        "description": "Refrigerante Coca-Cola gelado em lata de 350ml.",
        "price": 6.90,
        "category": "bebidas",
        "serves": "1 pessoa",
        "volume": "350ml",
    },
    {
        "name": "Batata Frita Pequena",
        "description": "Porção pequena de batata frita crocante e sequinha.",
        "price": 15.90,
        "category": "batatas",
        "serves": "1-2 pessoas",
        "volume": "200g",
    },
]


def seed_menu() -> dict[str, str]:
    """Load the initial menu into the current (menu) domain.

    Returns the mapping of seed slug to generated category id.
    """
    category_ids = {}
    for slug, name in CATEGORIES:
        category_ids[slug] = current_domain.process(AddCategory(name=name), asynchronous=False)

    for data in PRODUCTS:
        current_domain.process(
            AddProduct(
                name=data["name"],
                description=data["description"],
                price=data["price"],
                original_price=data.get("original_price"),
                category_id=category_ids[data["category"]],
                serves=data.get("serves"),
                volume=data.get("volume"),
                is_featured=data.get("is_featured", False),
                tags=json.dumps(data["tags"]) if data.get("tags") else None,
            ),
            asynchronous=False,
        )

    logger.info("Menu seeded", categories=len(CATEGORIES), products=len(PRODUCTS))
    return category_ids
