import os

# Root folder for rendered layouts
OUTPUT_DIR = os.environ.get("FORCEGRAPH_OUTPUT_DIR", "output")
GRAPHS_OUTPUT_DIR = os.path.join(OUTPUT_DIR, "graphs")
