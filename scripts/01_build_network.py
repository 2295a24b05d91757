import logging
from pathlib import Path

from interlock_net.network_analysis import build_bipartite_network, project_actors, project_entities
from interlock_net.network_analysis.io import (
    read_affiliations,
    write_edges,
    write_nodes,
    write_projection_edges,
)


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root = Path(__file__).parents[1] / "datasets/sample"
    print(f"Using data root directory: {root}")

    networks_dir = root / "output" / "01_networks"

    # Step 1: Bipartite graph and its two projections
    records = read_affiliations(root / "affiliations.csv")
    graph = build_bipartite_network(records)
    actors = project_actors(graph)
    entities = project_entities(graph)

    write_nodes(networks_dir / "bipartite_nodes.csv", graph.nodes)
    write_edges(networks_dir / "bipartite_edges.csv", graph.edges)
    write_projection_edges(networks_dir / "actor_edges.csv", actors)
    write_projection_edges(networks_dir / "entity_edges.csv", entities)

    logging.info(
        f"Bipartite network: {graph.num_nodes} nodes, {graph.num_edges} edges. "
        f"Actor projection: {actors.num_edges} edges. "
        f"Entity projection: {entities.num_edges} edges."
    )


if __name__ == "__main__":
    main()
