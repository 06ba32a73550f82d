"""Simple entrypoint to run the outfit recommender locally."""

import argparse
import json
from pathlib import Path

from services.outfit_recommender import OutfitRecommender
from stylist_app.config import EngineConfig
from stylist_app.logging_config import configure_logging

SAMPLE_REQUEST = {
    "items": [
        {"id": "1", "name": "Structured White Shirt", "category": "Tops", "color": "white"},
        {"id": "2", "name": "Black Tailored Trousers", "category": "Bottoms", "color": "black"},
        {"id": "3", "name": "Black Leather Boots", "category": "Shoes", "color": "black"},
        {"id": "4", "name": "Navy Blazer", "category": "Outerwear", "color": "navy"},
        {"id": "5", "name": "Statement Watch", "category": "Accessories", "color": "gold"},
    ],
    "preferences": {"eventType": "Work", "mood": "Confident"},
}


def main() -> None:
    parser = argparse.ArgumentParser(description="Print outfit recommendations for a wardrobe.")
    parser.add_argument("request", nargs="?", help="JSON file with {items, preferences}")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible output")
    args = parser.parse_args()

    config = EngineConfig.from_env()
    if args.seed is not None:
        config.random_seed = args.seed
    configure_logging(config.log_level)

    request = json.loads(Path(args.request).read_text()) if args.request else SAMPLE_REQUEST
    recommender = OutfitRecommender(config)
    response = recommender.handle_request(items=request.get("items", []), preferences=request.get("preferences", {}))
    if response.get("status") == "ok":
        response["gaps"] = recommender.gaps(request.get("items", []))
    print(json.dumps(response, indent=2))


if __name__ == "__main__":
    main()
