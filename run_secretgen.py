import sys

from secretgen import PasswordConfig, generate_password
from secretgen.cli import main

if __name__ == "__main__":
    if len(sys.argv) > 1:
        sys.exit(main())

    secret = generate_password(PasswordConfig())  # uses the defaults from config.py
    print("\n[Secret Generator]")
    print(f"Generated password: {secret.value}")
    print(f"Strength: {secret.strength_label.value}, crack time: {secret.crack_time_label}\n")
