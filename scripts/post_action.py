#!/usr/bin/env python3
"""
Send a storage action to a workflow storage server.

Usage:
  # store inline JSON under workflow "wf-demo"
  python scripts/post_action.py store \
    --host http://127.0.0.1:8094 \
    --workflow wf-demo \
    --id step-1 \
    --text '{"a":1}'

  # fetch it back into a local file
  python scripts/post_action.py retrieve \
    --id step-1 \
    --location s3://px-semantic/workflow-results/wf-demo/step-1.json \
    --output-file /tmp/step-1.json
"""
import os, sys, json, argparse
import requests

ACTION_PATH = "/v1/api/semantic/action"

def build_action(verb, identifier, text=None, fmt=None, location=None, output_file=None, output_type=None):
    action = {
        "@context": "https://schema.org",
        "@type": {"store": "StoreAction", "retrieve": "RetrieveAction", "delete": "DeleteAction"}[verb],
        "identifier": identifier,
        "object": {"@type": "DigitalDocument"},
    }
    if verb == "store":
        action["object"]["text"] = text
        if fmt:
            action["object"]["encodingFormat"] = fmt
    else:
        action["object"]["contentUrl"] = location
    props = {}
    if output_file:
        props["outputFile"] = output_file
    if output_type:
        props["outputType"] = output_type
    if props:
        action["additionalProperty"] = props
    return action

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("verb", choices=["store", "retrieve", "delete"])
    ap.add_argument("--host", default=os.getenv("WFS_URL", "http://127.0.0.1:8094"))
    ap.add_argument("--workflow", default=None, help="sent as X-Workflow-ID")
    ap.add_argument("--id", dest="identifier", required=True)
    ap.add_argument("--text", default=None)
    ap.add_argument("--format", dest="fmt", default=None)
    ap.add_argument("--location", default=None)
    ap.add_argument("--output-file", dest="output_file", default=None)
    ap.add_argument("--output-type", dest="output_type", choices=["inline", "file"], default=None)
    args = ap.parse_args()

    if args.verb == "store" and args.text is None:
        print("--text is required for store", file=sys.stderr)
        return 2
    if args.verb != "store" and not args.location:
        print(f"--location is required for {args.verb}", file=sys.stderr)
        return 2

    action = build_action(args.verb, args.identifier, args.text, args.fmt,
                          args.location, args.output_file, args.output_type)
    headers = {"content-type": "application/json"}
    if args.workflow:
        headers["X-Workflow-ID"] = args.workflow

    r = requests.post(f"{args.host.rstrip('/')}{ACTION_PATH}", headers=headers, json=action, timeout=10)
    print("Status:", r.status_code)
    try:
        print(json.dumps(r.json(), indent=2))
    except ValueError:
        print(r.text)
    return 0 if r.ok else 1

if __name__ == "__main__":
    raise SystemExit(main())
