import pytest

from vultrcli.nodepools import (
    NodePoolFormatError,
    NodePoolReq,
    format_node_data,
    format_node_labels,
    format_node_pools,
)


def test_single_pool_from_example():
    pools = format_node_pools(["quantity:3,plan:vc2-2c-4gb,label:my-nodepool,tag:my-tag"])
    assert pools == [
        NodePoolReq(node_quantity=3, plan="vc2-2c-4gb", label="my-nodepool", tag="my-tag")
    ]


def test_multiple_pools_with_autoscaler():
    pools = format_node_pools(
        [
            "quantity:1,plan:vc2-4c-8gb,label:main-node-pool/"
            "quantity:5,plan:vc2-2c-4gb,label:worker-pool,auto-scaler:true,min-nodes:5,max-nodes:10"
        ]
    )
    assert len(pools) == 2
    assert pools[0].label == "main-node-pool"
    assert pools[0].auto_scaler is None
    assert pools[1].auto_scaler is True
    assert (pools[1].min_nodes, pools[1].max_nodes) == (5, 10)


def test_node_labels_in_pool():
    pools = format_node_pools(
        [
            "quantity:5,plan:vc2-2c-4gb,label:worker-pool,"
            "node-labels:application=identity-service|worker-size=small"
        ]
    )
    assert pools[0].labels == {"application": "identity-service", "worker-size": "small"}


def test_only_first_argument_is_used():
    pools = format_node_pools(["quantity:1,plan:p,label:a", "quantity:2,plan:q,label:b"])
    assert [p.label for p in pools] == ["a"]


@pytest.mark.parametrize(
    "text",
    [
        "quantity:1,plan:p",
        "a:1,b:2,c:3,d:4,e:5,f:6,g:7,h:8,i:9",
    ],
)
def test_field_count_limits(text):
    with pytest.raises(NodePoolFormatError, match="each node pool must include"):
        format_node_pools([text])


def test_empty_input_rejected():
    with pytest.raises(NodePoolFormatError):
        format_node_pools([])


def test_invalid_key_value_format():
    with pytest.raises(NodePoolFormatError, match="invalid node pool format"):
        format_node_data(["plan", "label:x"])


def test_three_part_field_uses_second_part():
    req = format_node_data(["plan:vc2:extra", "label:x", "quantity:2"])
    assert req.plan == "vc2"
    assert req.node_quantity == 2


def test_unknown_fields_ignored():
    req = format_node_data(["colour:blue", "label:x", "plan:p"])
    assert req == NodePoolReq(label="x", plan="p")


@pytest.mark.parametrize(
    "item, message",
    [
        ("quantity:three", "invalid value for node pool quantity"),
        ("min-nodes:1.5", "invalid value for node pool min-nodes"),
        ("max-nodes: 2", "invalid value for max-nodes"),
        ("auto-scaler:yes", "invalid value for node pool auto-scaler"),
    ],
)
def test_bad_values(item, message):
    with pytest.raises(NodePoolFormatError, match=message):
        format_node_data([item])


@pytest.mark.parametrize("word, expected", [("T", True), ("1", True), ("False", False), ("0", False)])
def test_auto_scaler_bool_words(word, expected):
    assert format_node_data([f"auto-scaler:{word}"]).auto_scaler is expected


def test_signed_integers_accepted():
    assert format_node_data(["quantity:+4"]).node_quantity == 4


def test_format_node_labels_keeps_second_part():
    assert format_node_labels("a=b=c|d=e") == {"a": "b", "d": "e"}


def test_format_node_labels_missing_equals():
    with pytest.raises(NodePoolFormatError):
        format_node_labels("novalue")


def test_to_dict_omits_unset_optionals():
    body = NodePoolReq(node_quantity=3, label="l", plan="p").to_dict()
    assert body == {"node_quantity": 3, "label": "l", "plan": "p", "tag": ""}


def test_to_dict_includes_set_optionals():
    req = format_node_data(
        ["quantity:2", "label:l", "plan:p", "auto-scaler:false", "min-nodes:1", "node-labels:k=v"]
    )
    body = req.to_dict()
    assert body["auto_scaler"] is False
    assert body["min_nodes"] == 1
    assert body["labels"] == {"k": "v"}
    assert "max_nodes" not in body