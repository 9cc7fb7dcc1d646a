"""Seed dataset of cat breeds.

Bump SEED_VERSION whenever BREEDS changes so that version-stamped startup
reseeds the stored catalog.
"""

from typing import Any

SEED_VERSION = "2024.1"


def _breed(
    code: str,
    name: str,
    origin: str,
    coat_length: str,
    body_type: str,
    temperament: str,
    activity_level: str,
    grooming_needs: str,
    lifespan: tuple[int, int],
    weight_female: tuple[float, float],
    weight_male: tuple[float, float],
    description: str,
    personality: tuple[int, int, int],
    **extra: Any,
) -> dict[str, Any]:
    return {
        "code": code,
        "name": name,
        "origin": origin,
        "coat_length": coat_length,
        "body_type": body_type,
        "temperament": temperament,
        "activity_level": activity_level,
        "grooming_needs": grooming_needs,
        "lifespan_min": lifespan[0],
        "lifespan_max": lifespan[1],
        "weight_min_female": weight_female[0],
        "weight_max_female": weight_female[1],
        "weight_min_male": weight_male[0],
        "weight_max_male": weight_male[1],
        "description": description,
        "personality": dict(zip(("energy", "friendliness", "intelligence"), personality)),
        "image_path": f"{name.lower().replace(' ', '_')}.jpg",
        **extra,
    }


BREEDS: list[dict[str, Any]] = [
    _breed(
        "ABY", "Abyssinian", "Ethiopia", "Short", "Foreign",
        "Active, curious, playful, intelligent", "High", "Low",
        (12, 15), (2.7, 4.0), (3.6, 5.4),
        "A lithe, ticked-coat cat that is always on the move and into everything.",
        (9, 7, 9),
        coat_pattern="Ticked tabby",
        health_issues="Pyruvate kinase deficiency, progressive retinal atrophy",
        genetic_info="PK deficiency (PKLR), rdAc-PRA (CEP290)",
        care_requirements="Daily play, climbing space, puzzle feeders.",
        ideal_for="Active households with time for interactive play.",
    ),
    _breed(
        "BEN", "Bengal", "United States", "Short", "Foreign",
        "Energetic, confident, playful, vocal", "High", "Low",
        (12, 16), (3.6, 5.4), (4.5, 6.8),
        "A wild-looking spotted or marbled cat descended from the Asian leopard cat.",
        (10, 7, 9),
        coat_pattern="Spotted or marbled tabby, rosettes",
        health_issues="Hypertrophic cardiomyopathy, progressive retinal atrophy",
        genetic_info="PRA-b (CIITA); glitter gene",
        care_requirements="High-energy play, cat trees, leash training welcome.",
        ideal_for="Experienced owners who want an interactive companion.",
    ),
    _breed(
        "BIR", "Birman", "Myanmar", "Semi-long", "Semi-cobby",
        "Gentle, affectionate, calm, social", "Medium", "Medium",
        (12, 16), (3.0, 4.5), (4.5, 6.0),
        "The sacred cat of Burma, colourpointed with four pure white gloves.",
        (5, 9, 7),
        coat_pattern="Colourpoint with white gloves",
        care_requirements="Weekly combing; the silky coat rarely mats.",
        ideal_for="Families and quieter homes.",
    ),
    _breed(
        "BOM", "Bombay", "United States", "Short", "Semi-cobby",
        "Affectionate, quiet, curious, gentle", "Medium", "Low",
        (12, 16), (2.7, 4.0), (3.6, 5.0),
        "A miniature panther with a jet-black patent-leather coat and copper eyes.",
        (6, 8, 7),
        coat_pattern="Solid black",
        health_issues="Craniofacial defect in some lines",
    ),
    _breed(
        "BSH", "British Shorthair", "United Kingdom", "Short", "Cobby",
        "Calm, independent, loyal, easygoing", "Low", "Low-Medium",
        (12, 20), (3.2, 5.4), (4.1, 7.7),
        "A round-faced, plush-coated cat famous for its placid nature.",
        (3, 6, 6),
        coat_pattern="Solid blue, many colours",
        health_issues="Hypertrophic cardiomyopathy, polycystic kidney disease",
        genetic_info="PKD1 screening recommended",
        ideal_for="Busy owners who want a self-reliant companion.",
    ),
    _breed(
        "CHA", "Chartreux", "France", "Short", "Semi-cobby",
        "Quiet, gentle, independent, observant", "Medium", "Low-Medium",
        (12, 15), (2.7, 4.5), (4.5, 7.0),
        "A robust blue-grey French cat with a smile-shaped muzzle and a water-resistant coat.",
        (5, 6, 8),
        coat_pattern="Solid blue",
        health_issues="Patellar luxation",
    ),
    _breed(
        "CRX", "Cornish Rex", "United Kingdom", "Short", "Oriental",
        "Playful, social, curious, attention-seeking", "High", "Low",
        (11, 15), (2.5, 3.5), (3.5, 4.5),
        "A greyhound-shaped cat with a coat of tight marcel waves.",
        (9, 9, 8),
        coat_pattern="Curly, many colours",
        genetic_info="Rex gene r (LPAR6)",
        care_requirements="Warm environment; wipe oily skin occasionally.",
    ),
    _breed(
        "DRX", "Devon Rex", "United Kingdom", "Short", "Semi-foreign",
        "Playful, mischievous, social, loyal", "High", "Low",
        (9, 15), (2.3, 3.6), (3.2, 4.5),
        "An elfin cat with huge ears and a loosely curled coat.",
        (9, 10, 8),
        coat_pattern="Wavy, many colours",
        health_issues="Hereditary myopathy, hypertrophic cardiomyopathy",
        genetic_info="Rex gene re (KRT71)",
    ),
    _breed(
        "EMA", "Egyptian Mau", "Egypt", "Short", "Semi-foreign",
        "Active, independent, loyal, athletic", "High", "Low",
        (12, 15), (2.3, 3.6), (3.2, 5.0),
        "The only naturally spotted domestic breed and one of the fastest cats.",
        (9, 6, 8),
        coat_pattern="Spotted tabby",
    ),
    _breed(
        "EXO", "Exotic Shorthair", "United States", "Short", "Cobby",
        "Gentle, calm, affectionate, routine-loving", "Low", "Medium",
        (12, 15), (3.0, 4.5), (3.5, 6.0),
        "A Persian in pyjamas: the Persian type with a short, dense coat.",
        (3, 8, 6),
        health_issues="Brachycephalic airway syndrome, polycystic kidney disease",
        genetic_info="PKD1 screening recommended",
    ),
    _breed(
        "HIM", "Himalayan", "United States", "Long", "Cobby",
        "Gentle, calm, affectionate, sweet", "Low", "High",
        (9, 15), (3.2, 4.5), (4.1, 5.4),
        "A colourpointed Persian combining Siamese markings with a luxurious coat.",
        (3, 8, 6),
        coat_pattern="Colourpoint",
        health_issues="Polycystic kidney disease, brachycephalic airway syndrome",
        care_requirements="Daily brushing and eye cleaning.",
    ),
    _breed(
        "JBT", "Japanese Bobtail", "Japan", "Short", "Foreign",
        "Playful, social, vocal, intelligent", "High", "Low",
        (15, 18), (2.5, 3.6), (3.6, 4.5),
        "A lucky-cat breed with a pom-pom tail and a talkative, outgoing nature.",
        (9, 9, 8),
        coat_pattern="Mi-ke (tricolour), many colours",
    ),
    _breed(
        "KOR", "Korat", "Thailand", "Short", "Semi-cobby",
        "Quiet, gentle, loyal, intelligent", "Medium", "Low",
        (15, 20), (2.5, 3.6), (3.6, 4.5),
        "A silver-tipped blue cat from Thailand, traditionally a gift of good fortune.",
        (6, 7, 8),
        coat_pattern="Silver-tipped blue",
        health_issues="GM1 and GM2 gangliosidosis",
        genetic_info="GM1 (GLB1), GM2 (HEXB) carrier testing",
    ),
    _breed(
        "MCO", "Maine Coon", "United States", "Long", "Semi-foreign",
        "Friendly, intelligent, playful, gentle", "Medium-High", "Medium",
        (12, 15), (3.6, 5.4), (5.4, 8.2),
        "A large, rugged gentle giant with tufted ears and a bushy tail.",
        (7, 9, 8),
        coat_pattern="Brown tabby, many colours",
        health_issues="Hypertrophic cardiomyopathy, hip dysplasia, spinal muscular atrophy",
        genetic_info="HCM (MYBPC3 A31P), SMA (LIX1/LNPEP)",
        care_requirements="Brushing twice a week; room to climb.",
    ),
    _breed(
        "MAN", "Manx", "Isle of Man", "Short", "Cobby",
        "Gentle, loyal, routine-loving, social", "Medium", "Low-Medium",
        (12, 16), (3.6, 4.5), (4.5, 5.4),
        "A tailless or short-tailed island cat with a rounded, rabbit-like gait.",
        (6, 8, 8),
        health_issues="Manx syndrome (spinal defects)",
        genetic_info="Tailless gene M (TBXT)",
    ),
    _breed(
        "NFC", "Norwegian Forest Cat", "Norway", "Long", "Semi-foreign",
        "Independent, calm, friendly, patient", "Medium", "Medium-High",
        (14, 16), (3.6, 5.4), (4.5, 7.0),
        "A sturdy Scandinavian climber with a double coat built for harsh winters.",
        (6, 7, 7),
        health_issues="Glycogen storage disease IV",
        genetic_info="GSD IV (GBE1)",
    ),
    _breed(
        "OCI", "Ocicat", "United States", "Short", "Semi-foreign",
        "Active, confident, outgoing, trainable", "High", "Low",
        (12, 18), (2.7, 4.5), (4.5, 6.8),
        "A domestic cat bred to resemble a wild ocelot, with bold thumbprint spots.",
        (9, 8, 9),
        coat_pattern="Spotted tabby",
    ),
    _breed(
        "PER", "Persian", "Iran", "Long", "Cobby",
        "Calm, gentle, sweet, quiet", "Low", "High",
        (12, 17), (3.2, 5.4), (4.1, 6.8),
        "Known for a long, luxurious coat, a flat face and a serene personality.",
        (2, 7, 6),
        coat_pattern="Solid, bicolour, many colours",
        health_issues="Polycystic kidney disease, brachycephalic airway syndrome",
        genetic_info="PKD1 screening recommended",
        care_requirements="Daily grooming to prevent mats.",
        ideal_for="Calm indoor homes.",
    ),
    _breed(
        "RAG", "Ragdoll", "United States", "Long", "Semi-foreign",
        "Gentle, affectionate, calm, social", "Low-Medium", "Medium",
        (12, 17), (3.6, 6.8), (5.4, 9.1),
        "A large, placid colourpointed cat that famously goes limp when held.",
        (4, 10, 7),
        coat_pattern="Colourpoint, mitted, bicolour",
        health_issues="Hypertrophic cardiomyopathy",
        genetic_info="HCM (MYBPC3 R820W)",
    ),
    _breed(
        "RUS", "Russian Blue", "Russia", "Short", "Foreign",
        "Quiet, reserved, gentle, intelligent", "Medium", "Low",
        (15, 20), (2.3, 4.5), (3.6, 5.4),
        "An elegant cat with a shimmering silver-blue double coat and green eyes.",
        (5, 6, 8),
        coat_pattern="Solid blue",
        ideal_for="Quiet homes with a predictable routine.",
    ),
    _breed(
        "SAV", "Savannah", "United States", "Short", "Foreign",
        "Adventurous, active, independent, curious", "High", "Low",
        (12, 20), (3.5, 6.5), (4.5, 11.0),
        "A tall, spotted hybrid of the domestic cat and the African serval.",
        (10, 6, 9),
        coat_pattern="Spotted",
        care_requirements="Secure, enriched environment and lots of exercise.",
    ),
    _breed(
        "SFS", "Scottish Fold", "United Kingdom", "Short", "Cobby",
        "Calm, affectionate, gentle, adaptable", "Low-Medium", "Low-Medium",
        (11, 15), (2.7, 4.0), (4.0, 6.0),
        "An owl-faced cat whose folded ears come from a cartilage mutation.",
        (4, 8, 7),
        health_issues="Osteochondrodysplasia",
        genetic_info="Fold gene Fd (TRPV4)",
    ),
    _breed(
        "SIA", "Siamese", "Thailand", "Short", "Oriental",
        "Active, vocal, social, demanding", "High", "Low",
        (15, 20), (2.5, 4.0), (3.5, 5.5),
        "An elegant, talkative cat with striking colour points and blue eyes.",
        (8, 9, 9),
        coat_pattern="Colourpoint",
        health_issues="Amyloidosis, progressive retinal atrophy",
        genetic_info="Colourpoint cs (TYR), PRA (CEP290)",
    ),
    _breed(
        "SIN", "Singapura", "Singapore", "Short", "Semi-cobby",
        "Playful, curious, independent, lively", "High", "Low",
        (12, 15), (1.8, 2.3), (2.3, 3.6),
        "One of the smallest breeds, with a sepia-ticked coat and large eyes.",
        (8, 7, 8),
        coat_pattern="Sepia agouti",
        health_issues="Pyruvate kinase deficiency",
    ),
    _breed(
        "SOM", "Somali", "Somalia", "Semi-long", "Foreign",
        "Playful, curious, active, independent", "High", "Medium",
        (11, 16), (2.7, 4.0), (3.6, 5.0),
        "A long-haired Abyssinian with a fox-like brush tail.",
        (9, 7, 8),
        coat_pattern="Ticked tabby",
        health_issues="Pyruvate kinase deficiency",
    ),
    _breed(
        "SPH", "Sphynx", "Canada", "Hairless", "Semi-foreign",
        "Affectionate, energetic, social, attention-seeking", "High", "Medium-High",
        (8, 14), (2.7, 4.0), (3.6, 5.4),
        "A warm, wrinkled, hairless cat with an extrovert personality.",
        (8, 10, 8),
        health_issues="Hypertrophic cardiomyopathy, skin conditions",
        genetic_info="Hairless hr (KRT71)",
        care_requirements="Weekly baths; protection from cold and sun.",
    ),
    _breed(
        "TUV", "Turkish Van", "Turkey", "Semi-long", "Semi-foreign",
        "Energetic, independent, playful, intelligent", "High", "Low-Medium",
        (12, 17), (3.2, 5.4), (4.5, 9.0),
        "The swimming cat: a chalk-white cat with coloured markings on head and tail.",
        (9, 6, 8),
        coat_pattern="Van pattern",
    ),
]
