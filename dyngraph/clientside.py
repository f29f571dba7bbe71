"""
Browser side of the graph view.

The server computes which visuals exist and how they look; this script only
applies each ViewPatch to d3 selections and runs the force simulation. Drag
handling and zoom stay entirely in d3.
"""

import json

from .settings import CLIENT_CONFIG

EXTERNAL_SCRIPTS = ["https://d3js.org/d3.v7.min.js"]

RENDER_PATCH = """
function(patch) {
    const cfg = %s;
    if (!patch) {
        return '';
    }

    function createView() {
        const container = document.getElementById("chart");
        const width = container.clientWidth || window.innerWidth;
        const height = window.innerHeight - cfg.headerHeight;

        const svg = d3.select(container)
            .append("svg")
            .attr("width", width)
            .attr("height", height);
        const canvas = svg.append("g");

        const zoom = d3.zoom()
            .scaleExtent(cfg.zoomExtent)
            .on("zoom", (event) => canvas.attr("transform", event.transform));
        svg.call(zoom);

        const simulation = d3.forceSimulation([])
            .force("link", d3.forceLink([]).id(d => d.id).distance(cfg.linkDistance))
            .force("charge", d3.forceManyBody().strength(cfg.chargeStrength))
            .force("center", d3.forceCenter(width / 2, height / 2));

        const view = {
            svg: svg,
            zoom: zoom,
            width: width,
            height: height,
            simulation: simulation,
            linkLayer: canvas.append("g"),
            nodeLayer: canvas.append("g"),
            labelLayer: canvas.append("g"),
            byId: new Map(),
            clicks: 0
        };

        // tick only reads positions
        simulation.on("tick", () => {
            view.linkLayer.selectAll("line")
                .attr("x1", d => d.source.x)
                .attr("y1", d => d.source.y)
                .attr("x2", d => d.target.x)
                .attr("y2", d => d.target.y);
            view.nodeLayer.selectAll("circle")
                .attr("cx", d => d.x)
                .attr("cy", d => d.y);
            view.labelLayer.selectAll("text")
                .attr("x", d => d.x + cfg.labelOffset[0])
                .attr("y", d => d.y + cfg.labelOffset[1]);
        });

        function dragstarted(event, d) {
            if (!event.active) simulation.alphaTarget(cfg.dragAlphaTarget).restart();
            d.fx = d.x;
            d.fy = d.y;
        }

        function dragged(event, d) {
            d.fx = event.x;
            d.fy = event.y;
        }

        function dragended(event, d) {
            if (!event.active) simulation.alphaTarget(0);
            d.fx = null;
            d.fy = null;
        }

        view.drag = d3.drag()
            .on("start", dragstarted)
            .on("drag", dragged)
            .on("end", dragended);
        return view;
    }

    function reset() {
        if (window.dyngraphView) {
            window.dyngraphView.simulation.stop();
        }
        d3.select("#chart").selectAll("*").remove();
        window.dyngraphView = createView();
        return window.dyngraphView;
    }

    function notifyClick(view, nodeId) {
        view.clicks += 1;
        window.dash_clientside.set_props("node-click", {data: {id: nodeId, seq: view.clicks}});
    }

    function sync(view) {
        // reuse simulation objects so retained nodes keep their positions
        const nodes = patch.nodes.map(v => Object.assign(view.byId.get(v.id) || {}, v));
        view.byId = new Map(nodes.map(n => [n.id, n]));
        const links = patch.links.map(l => Object.assign({}, l));

        view.linkLayer.selectAll("line")
            .data(links, d => d.key)
            .join(enter => enter.append("line"))
            .attr("stroke", d => d.stroke)
            .attr("stroke-width", d => d.strokeWidth);

        view.nodeLayer.selectAll("circle")
            .data(nodes, d => d.id)
            .join(enter => enter.append("circle")
                .call(view.drag)
                .on("click", (event, d) => notifyClick(view, d.id)))
            .attr("r", d => d.radius)
            .attr("fill", d => d.fill);

        view.labelLayer.selectAll("text")
            .data(nodes, d => d.id)
            .join(enter => enter.append("text")
                .on("click", (event, d) => {
                    if (d.link) window.open(d.link, "_blank");
                }))
            .text(d => d.label)
            .attr("font-size", cfg.labelFontSize)
            .attr("fill", cfg.labelColor)
            .attr("cursor", d => d.cursor);

        if (patch.restart) {
            view.simulation.nodes(nodes);
            view.simulation.force("link").links(links);
            view.simulation.alpha(1).restart();
        }
    }

    function highlight(view) {
        const fills = new Map(patch.nodes.map(v => [v.id, v.fill]));
        const strokes = new Map(patch.links.map(l => [l.key, l.stroke]));

        view.nodeLayer.selectAll("circle")
            .attr("fill", d => (d.fill = fills.get(d.id) || d.fill));
        view.linkLayer.selectAll("line")
            .attr("stroke", d => (d.stroke = strokes.get(d.key) || d.stroke));

        const focus = patch.focus ? view.byId.get(patch.focus) : null;
        if (focus) {
            const transform = d3.zoomIdentity
                .translate(view.width / 2, view.height / 2)
                .scale(cfg.focusScale)
                .translate(-focus.x, -focus.y);
            view.svg.transition().duration(cfg.focusDuration).call(view.zoom.transform, transform);
        }
    }

    function apply() {
        let view = window.dyngraphView;
        if (patch.kind === "reset" || !view) {
            view = reset();
        }
        if (patch.kind === "highlight") {
            highlight(view);
        } else {
            sync(view);
        }
    }

    if (window.d3) {
        apply();
    } else {
        const interval = setInterval(() => {
            if (!window.d3) return;
            clearInterval(interval);
            apply();
        }, 100);
    }
    return patch.kind;
}
""" % json.dumps(CLIENT_CONFIG)
