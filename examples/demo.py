"""
jsonmend demonstration script.
"""

import jsonmend


def main():
    print("jsonmend - JSON Repair Demo")
    print("=" * 40)

    examples = [
        # Basic unquoted keys
        ('{name: "Seb", age: 42,}', "Unquoted keys and trailing comma"),
        # Single quotes
        ("{'name': 'John', 'age': 30}", "Single quotes"),
        # Unquoted values
        ("{city: Paris, active: True}", "Bare words and capitalized literals"),
        # Quotes inside a string
        ('{"comment": "His name is "John"."}', "Unescaped inner quotes"),
        # Complex real-world example
        (
            """
        {
            // server settings
            server: {
                host: 'localhost',
                port: 8080,
                ssl: FALSE,
            },
            retries: NaN,
            features: ['auth', 'logging']
        """,
            "Commented, truncated configuration",
        ),
    ]

    for i, (text, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {text.strip()}")

        try:
            print(f"Output: {jsonmend.repair(text)}")
        except jsonmend.RecoveryError as e:
            print(f"Error:  {e}")

    reply = "Sure, here it is:\n```json\n{answer: 'yes', score: 0.9,}\n```\nAnything else?"
    print("\nModel reply with extract_json")
    print(f"Output: {jsonmend.loads(reply, extract_json=True)}")


if __name__ == "__main__":
    main()
