#!/usr/bin/env python3
"""Write the built-in Irish exercises into file storage."""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.exercises import get_seed_data
from server.file_storage import FileStorage


def main():
    parser = argparse.ArgumentParser(description='Seed focal exercises')
    parser.add_argument('--data-dir', default=None, help='Storage directory (default: project root)')
    args = parser.parse_args()

    storage = FileStorage(state_dir=args.data_dir)
    exercises = get_seed_data()
    storage.seed_exercises(exercises)

    for exercise in exercises:
        print(f"  {exercise['id']:<15} {len(exercise['units'])} units")
    print(f"Seeded {len(exercises)} exercises into {storage.state_dir}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
