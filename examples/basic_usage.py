"""
Basic usage example.

Demonstrates host parsing, IDN renditions, label mutation and public
suffix decomposition.
"""

import logging

from uri_host import Encoding, Host, HostSyntaxError, PublicSuffixRules, get_config


def main():
    """Run basic usage example."""
    config = get_config()
    logging.basicConfig(
        level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    print("=" * 60)
    print("uri-host: Basic Usage Example")
    print("=" * 60)

    # Example 1: Classification
    print("\n1. Host Classification")
    print("-" * 60)

    for raw in ["WWW.Example.COM", "127.0.0.1", "[FE80::1%25eth0]", "[v1.fe]", "my_host"]:
        host = Host(raw)
        print(f"{raw:<20} -> {host.category.value:<16} {host}")

    try:
        Host("tot.    .coucou.com")
    except HostSyntaxError as e:
        print(f"\nRejected: {e}")

    # Example 2: Internationalized domain names
    print("\n\n2. IDN Renditions")
    print("-" * 60)

    host = Host("Bücher.example")
    print(f"ASCII:   {host.get_content(Encoding.ASCII)}")
    print(f"Unicode: {host.get_content(Encoding.UNICODE)}")

    # Example 3: Labels
    print("\n\n3. Label Mutation")
    print("-" * 60)

    host = Host("www.example.com")
    print(f"Labels (right to left): {list(host)}")
    print(f"Left-most label:        {host.get_label(-1)}")
    print(f"with_label(-1, 'shop'): {host.with_label(-1, 'shop')}")
    print(f"prepend('eu'):          {host.prepend('eu')}")
    print(f"with_root_label():      {host.with_root_label()}")

    # Example 4: Public suffix decomposition
    print("\n\n4. Public Suffix Decomposition")
    print("-" * 60)

    rules = PublicSuffixRules.from_default()
    print(f"Loaded {rules!r}")

    host = Host("www.waxaudio.com.au", suffix_rules=rules)
    print(f"Public suffix:      {host.get_public_suffix()}")
    print(f"Registrable domain: {host.get_registrable_domain()}")
    print(f"Subdomain:          {host.get_sub_domain()}")
    print(f"Known suffix:       {host.is_public_suffix_valid()}")
    print(f"with_sub_domain('shop'): {host.with_sub_domain('shop')}")

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
