"""Static ingredient rule tables used by the matcher.

All tables are read-only after import. Lists are stored as tuples and
mappings are wrapped in ``MappingProxyType``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Substitution:
    """Acceptable substitutes for an ingredient plus a conversion hint."""

    can_substitute_with: tuple[str, ...]
    conversion_note: str


# Too specific to ever stand in for (or be replaced by) anything else
NEVER_MATCH_INGREDIENTS: tuple[str, ...] = (
    # Specialty flours
    "almond flour", "coconut flour", "cake flour", "bread flour",
    "self rising flour", "whole wheat flour", "gluten free flour",
    "gluten-free flour", "oat flour", "rice flour",
    # Specialty sugars and sweeteners
    "powdered sugar", "confectioners sugar", "coconut sugar", "maple sugar",
    "swerve", "stevia", "erythritol", "monk fruit", "xylitol",
    "sugar substitute",
    # Alternative milks
    "almond milk", "oat milk", "soy milk", "coconut milk", "rice milk",
    "cashew milk",
    # Compound dairy
    "buttermilk", "sour cream", "heavy cream", "half and half",
    "cream cheese",
    # Vegan / plant-based
    "vegan butter", "vegan cheese", "vegan milk", "vegan bacon",
    "vegan sausage", "vegan beef", "vegan chicken", "plant butter",
    "plant milk", "plant beef",
    # Extracts and seasonings
    "vanilla extract", "almond extract", "garlic powder", "onion powder",
    # Leaveners and baking
    "baking powder", "baking soda", "cream of tartar", "xanthan gum",
    # Tomato products
    "tomato paste", "tomato sauce", "crushed tomatoes", "diced tomatoes",
    "tomato puree", "sun dried tomatoes", "cherry tomatoes",
    "roma tomatoes", "whole tomatoes",
)

_TOMATO_PRODUCT_BLOCKS = ("tomato", "tomatoes", "whole tomatoes", "fresh tomatoes")
_FRESH_TOMATO_BLOCKS = ("tomato paste", "tomato sauce", "crushed tomatoes", "diced tomatoes")

NEVER_CROSS_MATCH: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "peanut butter": ("butter",),
    "almond butter": ("butter",),
    "green onions": ("onion", "onions"),
    "scallions": ("onion", "onions"),
    "red bell pepper": ("pepper",),
    "green bell pepper": ("pepper",),
    "red pepper diced": ("pepper",),
    "buttermilk": ("milk", "butter"),
    "heavy cream": ("milk",),
    "sour cream": ("cream", "milk"),
    "cream cheese": ("cheese", "cream"),
    "vegan bacon": ("bacon",),
    "sugar substitute": ("sugar",),
    "brown sugar": ("sugar",),
    "packed brown sugar": ("sugar",),
    # Tomato products
    "tomato paste": _TOMATO_PRODUCT_BLOCKS,
    "tomato sauce": _TOMATO_PRODUCT_BLOCKS,
    "crushed tomatoes": _TOMATO_PRODUCT_BLOCKS,
    "diced tomatoes": _TOMATO_PRODUCT_BLOCKS,
    "tomato puree": _TOMATO_PRODUCT_BLOCKS,
    "sun dried tomatoes": _TOMATO_PRODUCT_BLOCKS,
    "cherry tomatoes": ("tomato", "tomatoes", "whole tomatoes"),
    "roma tomatoes": ("tomato", "tomatoes", "whole tomatoes"),
    "whole tomatoes": _FRESH_TOMATO_BLOCKS,
    "fresh tomatoes": _FRESH_TOMATO_BLOCKS,
    # Beef cuts
    "cube steaks": ("ground beef", "steak", "roast"),
    "cubed steaks": ("ground beef", "steak", "roast"),
    "ground beef": ("cube steaks", "cubed steaks", "steak", "roast"),
    "ribeye steak": ("ground beef", "chuck roast", "round steak"),
    "strip steak": ("ground beef", "chuck roast", "round steak"),
    "sirloin steak": ("ground beef", "chuck roast"),
    "chuck roast": ("steak", "ground beef"),
    "brisket": ("steak", "ground beef", "roast"),
    "short ribs": ("steak", "ground beef"),
    "stew meat": ("steak", "roast"),
    # Pork cuts
    "pork shoulder": ("pork chops", "pork tenderloin", "ground pork", "bacon"),
    "boston butt": ("pork chops", "pork tenderloin", "ground pork", "bacon"),
    "pork chops": ("ground pork", "pork shoulder", "pork belly", "bacon"),
    "pork tenderloin": ("ground pork", "pork shoulder", "pork chops", "bacon"),
    "ground pork": ("pork chops", "pork tenderloin", "pork shoulder", "bacon"),
    "pork belly": ("pork chops", "pork tenderloin", "ground pork"),
    "bacon": ("pork chops", "pork tenderloin", "ground pork", "pork shoulder"),
    "italian sausage": ("ground pork", "pork chops", "pork tenderloin"),
    "baby back ribs": ("spare ribs", "pork chops", "ground pork"),
    "spare ribs": ("baby back ribs", "pork chops", "ground pork"),
    # Poultry cuts
    "chicken breast": ("ground chicken", "chicken thighs", "chicken wings", "chicken legs"),
    "chicken thighs": ("chicken breast", "ground chicken", "chicken wings"),
    "chicken legs": ("chicken breast", "chicken thighs", "ground chicken", "chicken wings"),
    "chicken wings": ("chicken breast", "chicken thighs", "chicken legs", "ground chicken"),
    "ground chicken": ("chicken breast", "chicken thighs", "chicken legs", "chicken wings"),
    "whole chicken": ("chicken breast", "chicken thighs", "ground chicken"),
    "turkey breast": ("ground turkey", "turkey thighs", "turkey legs"),
    "ground turkey": ("turkey breast", "turkey thighs", "turkey legs", "whole turkey"),
    "whole turkey": ("turkey breast", "ground turkey"),
    # Cross-species
    "pork": ("chicken", "turkey", "beef", "duck"),
    "chicken": ("pork", "beef", "turkey", "duck"),
    "turkey": ("chicken", "pork", "beef", "duck"),
    "beef": ("pork", "chicken", "turkey", "duck"),
    "duck": ("chicken", "turkey", "pork", "beef"),
})

# Informational only: never consulted by can_match / best_match
INTELLIGENT_SUBSTITUTIONS: MappingProxyType[str, Substitution] = MappingProxyType({
    "garlic cloves": Substitution(
        ("minced garlic", "garlic", "chopped garlic", "garlic jar"),
        "1 clove ≈ 1 tsp minced garlic",
    ),
    "garlic cloves minced": Substitution(
        ("minced garlic", "garlic", "garlic cloves"),
        "1 clove ≈ 1 tsp minced garlic",
    ),
    "minced garlic": Substitution(
        ("garlic cloves", "garlic", "fresh garlic"),
        "1 tsp ≈ 1 clove fresh garlic",
    ),
    "bread": Substitution(
        (
            "sandwich bread", "wheat bread", "white bread",
            "sandwich wheat bread", "honey wheat bread", "texas toast",
            "sourdough bread", "rye bread",
        ),
        "Any bread type works for generic bread",
    ),
    "ground hamburger": Substitution(
        ("ground beef", "hamburger", "ground chuck", "lean ground beef"),
        "Ground hamburger is the same as ground beef",
    ),
    "hamburger": Substitution(
        ("ground beef", "ground hamburger", "ground chuck"),
        "Hamburger meat is ground beef",
    ),
    "cube steaks": Substitution(
        ("cubed steaks", "minute steaks", "swiss steaks", "tenderized steaks"),
        "All are mechanically tenderized steaks - same cooking method",
    ),
    "ground beef": Substitution(
        ("ground chuck", "ground round", "ground sirloin", "lean ground beef"),
        "Ground chuck (80/20), round (85/15), sirloin (90/10) - adjust for fat content",
    ),
    "chicken breast": Substitution(
        (
            "boneless chicken breast", "boneless skinless chicken breast",
            "chicken breast fillets",
        ),
        "Boneless cuts cook faster - adjust cooking time",
    ),
    "pork chops": Substitution(
        ("center cut pork chops", "loin chops", "rib chops", "boneless pork chops"),
        "Bone-in vs boneless affects cooking time",
    ),
    "italian sausage": Substitution(
        ("sweet italian sausage", "hot italian sausage", "mild italian sausage"),
        "Adjust spice level - sweet/mild vs hot/spicy",
    ),
    "all purpose flour": Substitution(
        ("plain flour", "white flour", "unbleached flour"),
        "Standard 1:1 substitution for basic flour",
    ),
    "whole milk": Substitution(
        ("2% milk", "1% milk", "skim milk"),
        "Lower fat content may affect richness in baking",
    ),
    "unsalted butter": Substitution(
        ("salted butter", "sweet cream butter"),
        "If using salted butter, reduce salt in recipe by 1/4 tsp per stick",
    ),
    "vegetable oil": Substitution(
        ("canola oil", "sunflower oil", "corn oil", "safflower oil"),
        "Neutral flavor oils - 1:1 substitution",
    ),
    "olive oil": Substitution(
        ("extra virgin olive oil", "light olive oil", "virgin olive oil"),
        "Extra virgin has stronger flavor - use less for subtle dishes",
    ),
})

INGREDIENT_VARIATIONS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    # Water
    "water": ("tap water", "filtered water", "cold water", "warm water", "hot water", "boiling water"),
    "hot water": ("water", "warm water", "boiling water"),
    # Eggs
    "eggs": (
        "egg", "large eggs", "extra large eggs", "jumbo eggs", "medium eggs",
        "fresh eggs", "whole eggs", "brown eggs", "white eggs",
    ),
    "egg": ("eggs", "large egg", "extra large egg", "fresh egg", "whole egg"),
    # Basic flour only
    "flour": (
        "all purpose flour", "all-purpose flour", "plain flour", "white flour",
        "unbleached flour", "bleached flour", "enriched flour", "wheat flour",
        "ap flour", "general purpose flour",
    ),
    # White sugar only
    "sugar": (
        "white sugar", "granulated sugar", "cane sugar", "pure cane sugar",
        "granulated white sugar", "table sugar", "regular sugar",
    ),
    "milk": (
        "whole milk", "2% milk", "1% milk", "skim milk", "vitamin d milk",
        "reduced fat milk", "low fat milk", "fresh milk", "dairy milk",
    ),
    "butter": (
        "unsalted butter", "salted butter", "sweet cream butter",
        "dairy butter", "real butter", "churned butter",
    ),
    "garlic": (
        "garlic cloves", "garlic bulb", "minced garlic", "fresh garlic",
        "chopped garlic", "whole garlic", "garlic head",
    ),
    "garlic cloves": ("garlic", "fresh garlic", "minced garlic"),
    "minced garlic": ("garlic", "garlic cloves"),
    "onion": (
        "onions", "yellow onion", "white onion", "sweet onion",
        "cooking onion", "spanish onion", "diced onion",
    ),
    "onions": ("onion", "yellow onion", "white onion", "sweet onion"),
    # Ground beef / hamburger
    "ground beef": (
        "beef", "hamburger", "ground chuck", "lean ground beef",
        "ground hamburger", "extra lean ground beef",
    ),
    "hamburger": ("ground beef", "ground hamburger", "beef", "ground chuck"),
    "bread": (
        "sandwich bread", "wheat bread", "white bread", "sandwich wheat bread",
        "honey wheat bread", "texas toast", "sourdough bread", "sliced bread",
    ),
    # Tomatoes: fresh kinds only, products stay separate
    "tomatoes": ("fresh tomatoes", "whole tomatoes", "ripe tomatoes"),
    "fresh tomatoes": ("tomatoes", "whole tomatoes", "ripe tomatoes"),
    "whole tomatoes": ("fresh tomatoes", "tomatoes", "ripe tomatoes"),
    "cherry tomatoes": ("grape tomatoes", "small tomatoes"),
    "roma tomatoes": ("plum tomatoes", "paste tomatoes"),
    "tomato paste": ("concentrated tomato paste", "double concentrated tomato paste"),
    "tomato sauce": ("marinara sauce", "basic tomato sauce"),
    "crushed tomatoes": ("crushed canned tomatoes",),
    "diced tomatoes": ("diced canned tomatoes", "chopped tomatoes"),
    # Beef: chuck
    "chuck roast": (
        "chuck pot roast", "chuck arm roast", "chuck blade roast",
        "shoulder roast", "chuck shoulder roast", "pot roast",
    ),
    "chuck steak": (
        "chuck blade steak", "chuck arm steak", "shoulder steak",
        "chuck eye steak", "chuck steaks",
    ),
    "chuck eye steak": ("chuck steak", "chuck eye", "mock tender steak"),
    "ground chuck": ("ground beef chuck", "chuck ground beef", "80/20 ground beef"),
    # Beef: rib
    "prime rib": ("standing rib roast", "prime rib roast", "rib roast"),
    "rib eye steak": ("ribeye steak", "ribeye", "rib eye", "delmonico steak", "spencer steak"),
    "ribeye steak": ("rib eye steak", "ribeye", "rib eye", "delmonico steak"),
    "ribeye": ("rib eye steak", "ribeye steak", "rib eye"),
    "short ribs": ("beef short ribs", "braising ribs", "chuck short ribs", "plate ribs"),
    # Beef: mechanically tenderized
    "cube steaks": ("cubed steaks", "cube steak", "cubed steak", "minute steaks", "swiss steaks", "minute steak"),
    "cubed steaks": ("cube steaks", "cube steak", "cubed steak", "minute steaks", "swiss steaks"),
    "cube steak": ("cubed steak", "cube steaks", "cubed steaks", "minute steak", "swiss steak"),
    "cubed steak": ("cube steak", "cube steaks", "cubed steaks", "minute steak"),
    "minute steaks": ("cube steaks", "cubed steaks", "minute steak", "swiss steaks"),
    "minute steak": ("minute steaks", "cube steak", "cubed steak"),
    "swiss steaks": ("cube steaks", "cubed steaks", "swiss steak"),
    "swiss steak": ("swiss steaks", "cube steaks"),
    # Beef: ground
    "ground round": ("ground beef", "lean ground beef", "85/15 ground beef"),
    "ground sirloin": ("ground beef", "extra lean ground beef", "90/10 ground beef"),
    "lean ground beef": ("ground beef", "ground round", "85/15 ground beef"),
    "extra lean ground beef": ("ground beef", "ground sirloin", "90/10 ground beef"),
    # Beef: stew and soup
    "stew meat": ("beef stew meat", "stewing beef", "stew beef", "beef for stew"),
    "beef stew meat": ("stew meat", "stewing beef", "chuck stew meat"),
    "stewing beef": ("stew meat", "beef stew meat", "stew beef"),
    "soup bones": ("beef soup bones", "marrow bones", "beef bones"),
    # Pork: shoulder
    "pork shoulder": (
        "boston butt", "pork butt", "shoulder roast", "boston shoulder",
        "pork shoulder roast", "pulled pork",
    ),
    "boston butt": ("pork shoulder", "pork butt", "shoulder roast", "boston shoulder", "pulled pork"),
    "pork butt": ("boston butt", "pork shoulder", "shoulder roast", "pulled pork"),
    # Pork: loin and chops
    "pork loin": ("center cut loin", "loin roast", "pork loin roast", "whole pork loin"),
    "pork chops": ("center cut pork chops", "loin chops", "center cut chops", "pork loin chops"),
    "pork tenderloin": ("tenderloin", "pork filet", "pork tender", "whole tenderloin"),
    # Pork: ribs
    "baby back ribs": ("baby ribs", "back ribs", "loin ribs", "top loin ribs"),
    "spare ribs": ("spareribs", "side ribs", "pork spare ribs"),
    "country style ribs": ("country-style ribs", "country ribs", "blade end ribs"),
    # Pork: ground and sausage
    "ground pork": ("pork mince", "minced pork", "ground pork meat"),
    "italian sausage": ("italian pork sausage", "sweet italian sausage", "hot italian sausage"),
    "pork sausage": ("fresh pork sausage", "breakfast sausage", "bulk sausage"),
    # Poultry: whole
    "whole chicken": ("whole fryer", "whole roaster", "whole broiler", "fryer chicken", "roaster chicken"),
    "fryer chicken": ("whole fryer", "young chicken", "broiler chicken"),
    # Poultry: breasts
    "chicken breast": ("chicken breasts", "bone-in chicken breast", "skin-on chicken breast"),
    "boneless chicken breast": (
        "boneless chicken breasts", "boneless skinless chicken breast",
        "chicken breast boneless",
    ),
    "boneless skinless chicken breast": (
        "boneless skinless chicken breasts", "boneless chicken breast",
        "skinless chicken breast",
    ),
    "chicken tenderloins": ("chicken tenderloin", "chicken tenders", "chicken strips"),
    "chicken tenders": ("chicken tenderloins", "chicken tenderloin", "chicken strips"),
    # Poultry: thighs
    "chicken thighs": ("chicken thigh", "bone-in chicken thighs", "skin-on chicken thighs"),
    "boneless chicken thighs": (
        "boneless chicken thigh", "boneless skinless chicken thighs",
        "chicken thighs boneless",
    ),
    # Poultry: legs and wings
    "chicken legs": ("chicken leg", "whole chicken legs", "chicken drumsticks"),
    "chicken drumsticks": ("chicken drumstick", "drumsticks", "chicken legs"),
    "chicken wings": ("chicken wing", "whole chicken wings", "party wings"),
    # Ground poultry
    "ground chicken": ("chicken mince", "minced chicken", "ground chicken meat"),
    "ground turkey": ("turkey mince", "minced turkey", "ground turkey meat"),
    "lean ground turkey": ("ground turkey", "extra lean ground turkey"),
    # Turkey parts
    "turkey breast": ("turkey breasts", "bone-in turkey breast", "whole turkey breast"),
    "boneless turkey breast": (
        "boneless turkey breasts", "turkey breast boneless",
        "boneless skinless turkey breast",
    ),
})
