#!/usr/bin/env python3
"""
Quick Start Guide for Typed XML-RPC.

This example shows the two API levels: module-level functions and the
configurable XmlRpcParser, plus how failures are reported.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from typed_xmlrpc import (
    Fault,
    FaultStructureError,
    ParserConfig,
    XmlRpcParseError,
    XmlRpcParser,
    parse_call,
    parse_response,
)

CALL = """<?xml version="1.0"?>
<methodCall>
  <methodName>examples.getStateName</methodName>
  <params><param><value><i4>41</i4></value></param></params>
</methodCall>"""

FAULT = """<?xml version="1.0"?>
<methodResponse><fault><value><struct>
  <member><name>faultCode</name><value><int>4</int></value></member>
  <member><name>faultString</name><value><string>Too many parameters.</string></value></member>
</struct></value></fault></methodResponse>"""


def quick_start_example():
    """Quick start example showing basic usage."""

    print("🚀 QUICK START - Typed XML-RPC")
    print("=" * 35)

    print("\n📞 Step 1: Parsing a method call")
    print("-" * 30)
    call = parse_call(CALL)
    print(f"✅ {call.name} called with {call.params}")

    print("\n📬 Step 2: Parsing a fault response")
    print("-" * 30)
    response = parse_response(FAULT)
    if isinstance(response, Fault):
        print(f"⚠️  Fault {response.code}: {response.message}")

    print("\n🛠️  Step 3: Configured parser")
    print("-" * 30)
    parser = XmlRpcParser(ParserConfig.deep_nesting(), correlation_id="quick-start")
    print(f"✅ Dispatched parse: {parser.parse(CALL)!r}")

    print("\n❌ Step 4: Error reporting")
    print("-" * 30)
    try:
        parse_response("<methodResponse><params>")
    except XmlRpcParseError as e:
        print(f"Parse error: {e.describe()}")

    try:
        parse_response(FAULT.replace("faultString", "message"))
    except FaultStructureError as e:
        print(f"Fault error ({e.problem.name}, {e.field}): {e}")


if __name__ == "__main__":
    quick_start_example()
